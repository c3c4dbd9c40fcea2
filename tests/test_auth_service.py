from datetime import timedelta
import uuid

from autoservice.services.auth_service import AuthService


def test_password_hash_round_trip():
    hashed = AuthService.hash_password("correct horse battery")

    assert hashed != "correct horse battery"
    assert AuthService.verify_password("correct horse battery", hashed)
    assert not AuthService.verify_password("wrong", hashed)


def test_token_carries_user_id():
    user_id = uuid.uuid4()
    token = AuthService.create_access_token({"sub": str(user_id)})

    assert AuthService.user_id_from_token(token) == user_id


def test_expired_or_garbage_tokens_are_rejected():
    expired = AuthService.create_access_token({"sub": str(uuid.uuid4())}, expires_delta=timedelta(seconds=-5))

    assert AuthService.user_id_from_token(expired) is None
    assert AuthService.user_id_from_token("not-a-token") is None
    assert AuthService.user_id_from_token(AuthService.create_access_token({"sub": "nope"})) is None


async def test_authenticate_user(db, user_id):
    assert (await AuthService.authenticate_user(db, "owner@example.com", "password123")).id == user_id
    assert await AuthService.authenticate_user(db, "owner@example.com", "bad-password") is None
    assert await AuthService.authenticate_user(db, "nobody@example.com", "password123") is None
