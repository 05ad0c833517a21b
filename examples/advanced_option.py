"""
Advanced options: optional dependencies that close themselves only if opened.

Run: python examples/advanced_option.py [source|dest|compare]
"""
import sys
from dataclasses import dataclass

from fluentfp import ClosableOption, ConsoleLogger, open_as_option

log = ConsoleLogger.from_env("advanced_option")


class Client:
    """A fake database client that returns its configured users."""

    def __init__(self, users: str):
        self.users = users
        log.info("client opened", users=users)

    def list_users(self) -> str:
        return self.users

    def close(self) -> None:
        log.info("client closed", users=self.users)


class ClientOption(ClosableOption[Client]):
    __slots__ = ()


@dataclass
class App:
    source: ClientOption
    dest: ClientOption

    def close(self) -> None:
        # each option knows whether it was opened
        self.source.close()
        self.dest.close()


def open_app(source_data: str = "", dest_data: str = "") -> App:
    return App(
        source=open_as_option(source_data, Client, ClientOption),
        dest=open_as_option(dest_data, Client, ClientOption),
    )


def main(command: str) -> None:
    source_data = '[{"email": "user1@example.com"}]'
    dest_data = '[{"email": "user2@example.com"}]'

    if command == "source":
        app = open_app(source_data=source_data)
        try:
            print("Source users:", app.source.must_get().list_users())
        finally:
            app.close()
    elif command == "dest":
        app = open_app(dest_data=dest_data)
        try:
            print("Dest users:", app.dest.must_get().list_users())
        finally:
            app.close()
    else:
        app = open_app(source_data, dest_data)
        try:
            src = app.source.must_get().list_users()
            dst = app.dest.must_get().list_users()
            print("data sources are in sync" if src == dst else "data sources are NOT in sync")
        finally:
            app.close()


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "compare")
