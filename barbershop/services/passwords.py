from __future__ import annotations

import bcrypt

BCRYPT_ROUNDS = 10


# =========================
# PASSWORD (bcrypt direto, sem passlib)
# - bcrypt só considera até 72 bytes
# =========================
def _normalize_password_for_bcrypt(password: str) -> bytes:
    pw = (password or "").encode("utf-8")
    if len(pw) <= 72:
        return pw
    return pw[:72]


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    pw = _normalize_password_for_bcrypt(password)
    hashed = bcrypt.hashpw(pw, bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    try:
        pw = _normalize_password_for_bcrypt(password)
        return bcrypt.checkpw(pw, password_hash.encode("utf-8"))
    except ValueError:
        # hash malformado
        return False

