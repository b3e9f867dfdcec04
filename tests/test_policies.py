"""
Set of tests for the move-selection policies.
"""
from unittest import TestCase, main

from numpy.random import default_rng

from bitboard2048.core.gamemove import Direction
from bitboard2048.policies import FunctionPolicy, Policy, RandomPolicy, as_policy


class TestPolicies(TestCase):
    """
    Test for the policy interface and the random policy.
    """

    def test_random_policy_avoids_failed(self):
        """Test if the random policy only plays untried directions."""
        policy = RandomPolicy(seed=0)
        failed = (Direction.LEFT, Direction.UP, Direction.DOWN)
        for _ in range(20):
            self.assertIs(policy.choose(0, failed), Direction.RIGHT)

    def test_random_policy_exhausted(self):
        """Test if the random policy gives up once every direction failed."""
        self.assertIs(RandomPolicy(seed=0).choose(0, Direction.moves()), Direction.NONE)

    def test_random_policy_accepts_generator(self):
        """Test if a generator and a seed produce the same draws."""
        from_seed = RandomPolicy(seed=5)
        from_generator = RandomPolicy(seed=default_rng(5))
        self.assertEqual(
            [from_seed.choose(0, ()) for _ in range(10)],
            [from_generator.choose(0, ()) for _ in range(10)],
        )

    def test_function_policy(self):
        """Test if a plain function is wrapped into a policy."""
        policy = as_policy(lambda board, failed: Direction.UP if board else Direction.NONE)
        self.assertIsInstance(policy, FunctionPolicy)
        self.assertIs(policy.choose(1, ()), Direction.UP)
        self.assertIs(policy.choose(0, ()), Direction.NONE)

    def test_policy_passthrough(self):
        """Test if a policy is returned unchanged."""
        policy = RandomPolicy()
        self.assertIs(as_policy(policy), policy)

    def test_invalid_policy(self):
        """Test if non-callable objects are rejected."""
        with self.assertRaises(TypeError):
            as_policy(42)

    def test_abstract_policy(self):
        """Test if the interface cannot be instantiated."""
        with self.assertRaises(TypeError):
            Policy()


if __name__ == "__main__":
    main()
