"""Issue a token and verify it with the right and the wrong secret."""

from __future__ import annotations

import logging
import os

from sigtoken import SignatureMismatchError, check, issue, load_secret, verify


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    os.environ.setdefault("SIGTOKEN_SECRET", "s3cr3t")
    secret = load_secret()

    token = issue({"user_id": 42}, secret)
    print("token:", token)
    print("payload:", verify(token, secret))

    try:
        verify(token, "wrong")
    except SignatureMismatchError as exc:
        print("rejected:", exc)

    print("check:", check(token, "wrong"))


if __name__ == "__main__":
    main()
