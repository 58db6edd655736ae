import base64
import json
import time

import pytest

from fake_backend import make_token

from socioai.auth.session_store import SessionStore, decode_claims
from socioai.auth.storage import LocalStorage
from socioai.utils.exceptions import AuthError


def _segment(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


# Python's json accepts these non-standard constants
NAN_EXP = b'{"sub": "x", "exp": NaN}'
INFINITE_EXP = b'{"sub": "x", "exp": Infinity}'


@pytest.mark.parametrize(
    "token",
    [
        "not-a-jwt",
        "only.two",
        "a.b.c.d",
        "header.%%%notbase64%%%.sig",
        f"h.{_segment(b'not json')}.s",
        f"h.{_segment(b'[1, 2, 3]')}.s",
        f"h.{_segment(json.dumps({'sub': ['x']}).encode())}.s",
        f"h.{_segment(NAN_EXP)}.s",
        f"h.{_segment(INFINITE_EXP)}.s",
    ],
)
def test_malformed_tokens_have_no_claims(session, token):
    session.set_token(token)

    assert session.has_token()
    assert session.get_claims() is None
    assert session.get_identity() is None
    assert session.is_expired()
    assert not session.is_authenticated()


def test_valid_token_is_authenticated(session, valid_token):
    session.set_token(valid_token)

    assert session.is_authenticated()
    assert session.get_identity() == "ana@socio.ai"
    assert session.require_identity() == "ana@socio.ai"


def test_payload_without_padding_decodes():
    # 1-char sub makes the payload length not a multiple of 4
    token = make_token("a", 2000000000)
    assert len(token.split(".")[1]) % 4 != 0

    claims = decode_claims(token)
    assert claims.sub == "a"
    assert claims.exp == 2000000000


def test_unknown_claims_are_kept():
    claims = decode_claims(make_token("bob", 2000000000, iss="socioai"))
    assert claims.iss == "socioai"


def test_token_without_exp_counts_as_expired(session):
    session.set_token(make_token("bob"))

    assert session.get_identity() == "bob"
    assert session.is_expired()
    assert not session.is_authenticated()


def test_expiry_boundary_uses_clock(storage):
    now = 1700000000.0
    store = SessionStore(storage, clock=lambda: now)

    store.set_token(make_token("bob", now + 1))
    assert not store.is_expired()

    store.set_token(make_token("bob", now))
    assert store.is_expired()


def test_no_token(session):
    assert not session.has_token()
    assert session.get_token() is None
    assert session.get_claims() is None
    assert not session.is_authenticated()
    with pytest.raises(AuthError):
        session.require_identity()


def test_empty_token_is_treated_as_absent(session, storage):
    storage.set_item("auth-token", "")
    assert not session.has_token()


def test_set_token_replaces_and_syncs_username(session, storage):
    session.set_token(make_token("first@socio.ai", time.time() + 60))
    session.set_token(make_token("second@socio.ai", time.time() + 60))

    assert session.get_identity() == "second@socio.ai"
    assert storage.get_item("username") == "second@socio.ai"


def test_undecodable_token_drops_stored_username(session, storage, valid_token):
    session.set_token(valid_token)
    session.set_token("garbage")

    assert storage.get_item("username") is None
    assert session.get_stored_username() is None


def test_clear_removes_token_and_username(session, storage, valid_token):
    session.set_token(valid_token)
    session.clear()

    assert storage.get_item("auth-token") is None
    assert storage.get_item("username") is None
    assert not session.has_token()


def test_token_written_elsewhere_is_seen(tmp_path):
    path = tmp_path / "shared.json"
    store = SessionStore(LocalStorage(path))
    assert not store.has_token()

    # Another process writing the same storage file
    LocalStorage(path).set_item("auth-token", make_token("carol", time.time() + 60))

    assert store.get_identity() == "carol"


def test_corrupt_storage_file_is_empty(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    store = SessionStore(LocalStorage(path))

    assert not store.has_token()
    store.set_token(make_token("dave", time.time() + 60))
    assert store.get_identity() == "dave"


def test_custom_keys(storage):
    store = SessionStore(storage, token_key="tk", username_key="who")
    store.set_token(make_token("erin", time.time() + 60))

    assert storage.get_item("tk") is not None
    assert storage.get_item("who") == "erin"
    assert storage.get_item("auth-token") is None


def test_writes_leave_only_the_storage_file(tmp_path, valid_token):
    store = SessionStore(LocalStorage(tmp_path / "ls.json"))

    store.set_token(valid_token)
    store.clear()

    assert [p.name for p in tmp_path.iterdir()] == ["ls.json"]
    assert json.loads((tmp_path / "ls.json").read_text(encoding="utf-8")) == {}
