import unittest

from fluentfp import Advanced, ClosableOption, NONE, NotOkError, Some, of, open_as_option


class Client:
    def __init__(self, users: str):
        self.users = users
        self.closed = 0

    def close(self) -> None:
        self.closed += 1

    def list_users(self) -> str:
        return self.users


class ClientOption(ClosableOption[Client]):
    __slots__ = ()

    def list_users(self) -> str:
        return self.basic.map(Client.list_users, str).or_empty()


class TestClosableOption(unittest.TestCase):
    def test_close_if_opened(self):
        c = Client("u1")
        ClosableOption(of(c)).close()
        self.assertEqual(c.closed, 1)

    def test_close_never_opened_is_noop(self):
        ClosableOption(NONE).close()
        ClosableOption().close()

    def test_context_manager(self):
        c = Client("u1")
        with ClosableOption(of(c)) as opt:
            self.assertIs(opt.must_get(), c)
        self.assertEqual(c.closed, 1)

    def test_forwarding(self):
        opt = ClosableOption(of(1))
        self.assertTrue(opt.is_ok())
        self.assertEqual(opt.get(), (1, True))
        self.assertEqual(ClosableOption().or_(2), 2)
        with self.assertRaises(NotOkError):
            ClosableOption().must_get()

    def test_equality(self):
        self.assertEqual(Advanced(Some(1)), Advanced(Some(1)))
        self.assertNotEqual(Advanced(Some(1)), ClosableOption(Some(1)))
        self.assertEqual(repr(ClosableOption(Some(1))), "ClosableOption(Some(1))")


class TestOpenAsOption(unittest.TestCase):
    def test_open_when_provided(self):
        opt = open_as_option("u1", Client, ClientOption)
        self.assertTrue(isinstance(opt, ClientOption))
        self.assertEqual(opt.list_users(), "u1")

    def test_not_requested(self):
        opened = []
        def opener(users):
            opened.append(users)
            return Client(users)
        opt = open_as_option("", opener)
        self.assertTrue(isinstance(opt, ClosableOption))
        self.assertFalse(opt.is_ok())
        self.assertEqual(opened, [])
        opt.close()

    def test_app_close_without_conditionals(self):
        source = open_as_option("u1", Client, ClientOption)
        dest = open_as_option("", Client, ClientOption)
        for dep in (source, dest):
            dep.close()
        self.assertEqual(source.must_get().closed, 1)
        self.assertEqual(dest.list_users(), "")
