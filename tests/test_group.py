import json
import os
import tempfile
import unittest

from cpauth import constants
from cpauth.exceptions import InvalidParameters
from cpauth.group import GroupParameters, default_parameters, load_parameters


class TestGroupParameters(unittest.TestCase):
    def test_default_group_is_valid(self) -> None:
        params = default_parameters()
        self.assertIs(params.validate(), params)
        self.assertEqual(params.p.bit_length(), 1024)
        self.assertEqual(params.q.bit_length(), 160)
        self.assertEqual(params.beta, pow(constants.ALPHA, int(constants.BETA_EXPONENT_HEX, 16), constants.P))

    def test_toy_group_is_valid(self) -> None:
        GroupParameters(p=23, q=11, alpha=4, beta=9).validate()

    def test_order_must_divide(self) -> None:
        with self.assertRaises(InvalidParameters):
            GroupParameters(p=23, q=7, alpha=4, beta=9).validate()

    def test_generator_of_wrong_order(self) -> None:
        # 5 generates the whole group of order 22.
        with self.assertRaises(InvalidParameters):
            GroupParameters(p=23, q=11, alpha=5, beta=9).validate()

    def test_trivial_generator(self) -> None:
        with self.assertRaises(InvalidParameters):
            GroupParameters(p=23, q=11, alpha=1, beta=9).validate()

    def test_identical_generators(self) -> None:
        with self.assertRaises(InvalidParameters):
            GroupParameters(p=23, q=11, alpha=4, beta=4).validate()

    def test_membership(self) -> None:
        params = GroupParameters(p=23, q=11, alpha=4, beta=9)
        self.assertTrue(params.in_subgroup(18))
        self.assertFalse(params.in_subgroup(5))
        self.assertFalse(params.is_element(0))
        self.assertFalse(params.is_element(23))

    def test_dict_round_trip(self) -> None:
        params = default_parameters()
        self.assertEqual(GroupParameters.from_dict(params.to_dict()), params)

    def test_malformed_dict(self) -> None:
        with self.assertRaises(InvalidParameters):
            GroupParameters.from_dict({"p": "0x17", "q": "0xb", "alpha": "zz", "beta": "0x9"})
        with self.assertRaises(InvalidParameters):
            GroupParameters.from_dict({"p": "0x17"})

    def test_load_parameters(self) -> None:
        self.assertEqual(load_parameters(None), default_parameters())
        toy = GroupParameters(p=23, q=11, alpha=4, beta=9)
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "group.json")
            with open(path, "w", encoding="utf-8") as handle:
                json.dump(toy.to_dict(), handle)
            self.assertEqual(load_parameters(path), toy)


if __name__ == "__main__":
    unittest.main()
