import threading
import unittest

from betgate.core.errors import ErrorKind
from betgate.models.user import Role, UserSummary
from betgate.services.gateway import Gateway


class GatewayTests(unittest.TestCase):
    def setUp(self) -> None:
        self.gateway = Gateway()
        self.assertTrue(self.gateway.register("alice", "pw1").ok)
        self.assertTrue(self.gateway.register("bob", "pw2", Role.ADMIN).ok)

    def login(self, username: str, password: str) -> str:
        outcome = self.gateway.login(username, password)
        self.assertTrue(outcome.ok, outcome.error)
        return outcome.value

    def test_second_registration_is_username_taken(self):
        outcome = self.gateway.register("alice", "whatever", Role.ADMIN)
        self.assertEqual(outcome.error, ErrorKind.USERNAME_TAKEN)
        self.assertEqual(self.gateway.directory.get("alice").role, Role.REGULAR)

    def test_login_errors(self):
        self.assertEqual(self.gateway.login("carol", "pw1").error, ErrorKind.WRONG_USERNAME)
        self.assertEqual(self.gateway.login("alice", "pw2").error, ErrorKind.WRONG_PASSWORD)
        self.assertEqual(self.gateway.sessions.active_sessions(), 0)

    def test_relogin_invalidates_first_token(self):
        first = self.login("alice", "pw1")
        second = self.login("alice", "pw1")

        self.assertEqual(self.gateway.place_bet(first, "x").error, ErrorKind.NOT_AUTHORIZED)
        self.assertEqual(self.gateway.list_own_bets(first).error, ErrorKind.NOT_AUTHORIZED)
        self.assertEqual(self.gateway.logout(first).error, ErrorKind.NOT_AUTHORIZED)
        self.assertEqual(self.gateway.list_own_bets(second).value, [])

    def test_logout_then_protected_operations_fail(self):
        token = self.login("bob", "pw2")
        self.assertTrue(self.gateway.logout(token).ok)

        for outcome in (
            self.gateway.logout(token),
            self.gateway.place_bet(token, "bet"),
            self.gateway.list_own_bets(token),
            self.gateway.list_users(token),
            self.gateway.ban_user(token, "alice"),
            self.gateway.whoami(token),
        ):
            self.assertEqual(outcome.error, ErrorKind.NOT_AUTHORIZED)

    def test_list_users_requires_admin(self):
        alice = self.login("alice", "pw1")
        self.assertEqual(self.gateway.list_users(alice).error, ErrorKind.ACCESS_DENIED)

        self.gateway.register("carol", "pw3")
        bob = self.login("bob", "pw2")
        self.gateway.ban_user(bob, "carol")
        self.assertEqual(
            self.gateway.list_users(bob).value,
            [UserSummary("alice", False), UserSummary("carol", True)],
        )

    def test_ban_user_rules(self):
        self.gateway.register("root", "pw", Role.ADMIN)
        bob = self.login("bob", "pw2")

        self.assertEqual(self.gateway.ban_user(bob, "root").error, ErrorKind.ACCESS_DENIED)
        self.assertEqual(self.gateway.ban_user(bob, "bob").error, ErrorKind.ACCESS_DENIED)
        self.assertEqual(self.gateway.ban_user(bob, "ghost").error, ErrorKind.WRONG_USERNAME)
        self.assertTrue(self.gateway.ban_user(bob, "alice").ok)
        self.assertTrue(self.gateway.ban_user(bob, "alice").ok)
        self.assertTrue(self.gateway.directory.get("alice").is_banned)

    def test_caller_role_is_checked_before_target_existence(self):
        alice = self.login("alice", "pw1")
        self.assertEqual(self.gateway.ban_user(alice, "ghost").error, ErrorKind.ACCESS_DENIED)

    def test_ban_keeps_existing_session_but_blocks_login(self):
        alice = self.login("alice", "pw1")
        bob = self.login("bob", "pw2")
        self.gateway.ban_user(bob, "alice")

        self.assertTrue(self.gateway.place_bet(alice, "late bet").ok)
        self.assertTrue(self.gateway.logout(alice).ok)
        self.assertEqual(self.gateway.login("alice", "pw1").error, ErrorKind.ACCESS_DENIED)

    def test_whoami_returns_a_snapshot(self):
        token = self.login("alice", "pw1")
        self.gateway.place_bet(token, "bet-A")

        user = self.gateway.whoami(token).value
        self.assertEqual((user.username, user.role, user.is_banned), ("alice", Role.REGULAR, False))
        user.bets.append("tampered")
        self.assertEqual(self.gateway.list_own_bets(token).value, ["bet-A"])

    def test_alice_and_bob_scenario(self):
        t1 = self.login("alice", "pw1")
        self.assertTrue(self.gateway.place_bet(t1, "bet-A").ok)
        self.assertTrue(self.gateway.place_bet(t1, "bet-B").ok)
        self.assertEqual(self.gateway.list_own_bets(t1).value, ["bet-A", "bet-B"])

        t2 = self.login("bob", "pw2")
        self.assertEqual(self.gateway.list_users(t2).value, [UserSummary("alice", False)])
        self.assertTrue(self.gateway.ban_user(t2, "alice").ok)
        self.assertEqual(self.gateway.login("alice", "pw1").error, ErrorKind.ACCESS_DENIED)

    def test_concurrent_registrations_admit_one_winner(self):
        results = []

        def register():
            results.append(self.gateway.register("dave", "pw"))

        threads = [threading.Thread(target=register) for _ in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(sum(1 for outcome in results if outcome.ok), 1)
        self.assertTrue(
            all(outcome.error == ErrorKind.USERNAME_TAKEN for outcome in results if not outcome.ok)
        )


if __name__ == "__main__":
    unittest.main()
