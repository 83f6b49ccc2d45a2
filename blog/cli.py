# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Administrative commands: schema setup, out-of-band user creation, dev server."""

from __future__ import annotations

import argparse
import getpass
import sys
from collections.abc import Sequence

from blog.app import create_app
from blog.container import Container
from blog.domain.users.exceptions import UserAlreadyExistsError
from blog.shared.config import load_config
from blog.shared.errors import ValidationError
from blog.shared.logging import logger, setup_logging


def _init_db(container: Container, _args: argparse.Namespace) -> int:
    container.database.create_tables()
    print("Database schema ensured")
    return 0


def _create_user(container: Container, args: argparse.Namespace) -> int:
    password = args.password
    if password is None:
        password = getpass.getpass("Password: ")
        if password != getpass.getpass("Repeat password: "):
            print("Passwords do not match", file=sys.stderr)
            return 1

    container.database.create_tables()
    try:
        user = container.create_user_use_case.execute(args.username, password)
    except UserAlreadyExistsError:
        print(f"User '{args.username}' already exists", file=sys.stderr)
        return 1
    except ValidationError:
        print("Username and password must not be empty", file=sys.stderr)
        return 1

    logger.info(f"cli.create_user: ok (user_id={user.id}, username={user.username})")
    print(f"Created user '{user.username}' (id={user.id})")
    return 0


def _serve(container: Container, args: argparse.Namespace) -> int:
    app = create_app(container.config, container=container)
    server = container.config.server
    print(f"Server is running on http://localhost:{args.port or server.port}")
    app.run(host=args.host or server.host, port=args.port or server.port, debug=args.debug)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blog-admin", description="Blog administration")
    sub = parser.add_subparsers(dest="command", required=True)

    init_db = sub.add_parser("init-db", help="Create the posts and users tables")
    init_db.set_defaults(handler=_init_db)

    create_user = sub.add_parser("create-user", help="Add a user who can log in")
    create_user.add_argument("username")
    create_user.add_argument(
        "--password",
        default=None,
        help="Password (prompted for when omitted)",
    )
    create_user.set_defaults(handler=_create_user)

    serve = sub.add_parser("serve", help="Run the development server")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.add_argument("--debug", action="store_true")
    serve.set_defaults(handler=_serve)

    return parser


def main(argv: Sequence[str] | None = None, *, container: Container | None = None) -> int:
    args = build_parser().parse_args(argv)
    if container is None:
        config = load_config()
        setup_logging(debug_mode=config.debug_logging)
        container = Container(config)
    return args.handler(container, args)


if __name__ == "__main__":
    sys.exit(main())
