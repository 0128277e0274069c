"""
Create a user directly in the store (e.g. the first SuperAdmin). Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user owner@example.com your-secure-password SuperAdmin
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.core.permissions import DEFAULT_ROLE, Role
from app.services.accounts import RegistrationError, register_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an inventory API user.")
    parser.add_argument("email", help="Email (stored exactly as given)")
    parser.add_argument("password", help="Password")
    parser.add_argument(
        "role",
        nargs="?",
        default=DEFAULT_ROLE.value,
        choices=[r.value for r in Role],
    )
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        user = register_user(db, args.email, args.password, Role(args.role))
    except RegistrationError as e:
        print(f"{e.message}: '{args.email}'", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.email}' with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
