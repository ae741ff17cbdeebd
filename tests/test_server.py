import unittest

from fastapi.testclient import TestClient

from cpauth.auth import AuthService
from cpauth.codec import encode_hex
from cpauth.group import GroupParameters, default_parameters
from cpauth.messages import Challenge
from cpauth.prover import Prover
from cpauth.server import create_app

TOY = GroupParameters(p=23, q=11, alpha=4, beta=9)


class TestAuthEndpoints(unittest.TestCase):
    def setUp(self) -> None:
        self.params = default_parameters()
        self.service = AuthService(self.params)
        self.client = TestClient(create_app(self.service))
        self.prover = Prover("alice", self.params).initialize()
        response = self.client.post("/register", json=self.prover.register().to_dict())
        self.assertEqual(response.status_code, 200)

    def _challenge(self) -> dict:
        response = self.client.post(
            "/authentication/challenge",
            json=self.prover.begin_authentication().to_dict(),
        )
        self.assertEqual(response.status_code, 200)
        return response.json()

    def test_parameters(self) -> None:
        response = self.client.get("/parameters")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(GroupParameters.from_dict(response.json()), self.params)

    def test_login_flow(self) -> None:
        payload = self._challenge()
        self.assertIn("auth_id", payload)
        c = int(payload["c"], 16)
        self.assertTrue(0 <= c < self.params.q)
        answer = self.prover.answer(Challenge.from_dict(payload))
        response = self.client.post("/authentication/verify", json=answer.to_dict())
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["session_id"])

        replay = self.client.post("/authentication/verify", json=answer.to_dict())
        self.assertEqual(replay.status_code, 404)

    def test_duplicate_registration(self) -> None:
        other = Prover("alice", self.params).initialize()
        response = self.client.post("/register", json=other.register().to_dict())
        self.assertEqual(response.status_code, 409)

    def test_unknown_user(self) -> None:
        stranger = Prover("mallory", self.params).restore(7)
        response = self.client.post(
            "/authentication/challenge",
            json=stranger.begin_authentication().to_dict(),
        )
        self.assertEqual(response.status_code, 404)
        self.assertIn("mallory", response.json()["detail"])

    def test_wrong_answer(self) -> None:
        payload = self._challenge()
        answer = self.prover.answer(Challenge.from_dict(payload))
        tampered = answer.to_dict()
        tampered["s"] = encode_hex((answer.s + 1) % self.params.q)
        response = self.client.post("/authentication/verify", json=tampered)
        self.assertEqual(response.status_code, 403)
        retry = self.client.post("/authentication/verify", json=answer.to_dict())
        self.assertEqual(retry.status_code, 404)

    def test_malformed_hex(self) -> None:
        response = self.client.post("/register", json={"user": "bob", "y1": "xyz", "y2": "01"})
        self.assertEqual(response.status_code, 400)

    def test_out_of_range_element(self) -> None:
        response = self.client.post(
            "/authentication/challenge",
            json={"user": "alice", "r1": encode_hex(self.params.p), "r2": "01"},
        )
        self.assertEqual(response.status_code, 400)

    def test_missing_field(self) -> None:
        response = self.client.post("/register", json={"user": "bob", "y1": "01"})
        self.assertEqual(response.status_code, 422)


class TestToyGroupOverHttp(unittest.TestCase):
    def test_worked_example(self) -> None:
        service = AuthService(TOY)
        service.math.random_challenge = lambda: 2
        client = TestClient(create_app(service))
        self.assertEqual(client.get("/parameters").json()["p"], "0x17")
        client.post("/register", json={"user": "alice", "y1": "12", "y2": "10"})
        challenge = client.post(
            "/authentication/challenge",
            json={"user": "alice", "r1": "0c", "r2": "08"},
        ).json()
        self.assertEqual(challenge["c"], "02")
        bad = client.post("/authentication/verify", json={"auth_id": challenge["auth_id"], "s": "09"})
        self.assertEqual(bad.status_code, 403)

        challenge = client.post(
            "/authentication/challenge",
            json={"user": "alice", "r1": "0c", "r2": "08"},
        ).json()
        good = client.post("/authentication/verify", json={"auth_id": challenge["auth_id"], "s": "0a"})
        self.assertEqual(good.status_code, 200)


if __name__ == "__main__":
    unittest.main()
