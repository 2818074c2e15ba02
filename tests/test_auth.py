from referral_tracker.auth import issue_token, load_token


def test_token_round_trip(app, referrer):
    assert load_token(issue_token(referrer)) is referrer


def test_expired_token_is_rejected(app, referrer):
    token = issue_token(referrer)
    app.config["AUTH_TOKEN_MAX_AGE"] = -1
    assert load_token(token) is None


def test_token_signed_with_other_key_is_rejected(app, referrer):
    token = issue_token(referrer)
    app.config["SECRET_KEY"] = "rotated"
    assert load_token(token) is None


def test_lowercase_bearer_scheme_is_accepted(client, referrer):
    r = client.get("/api/candidates", headers={"Authorization": f"bearer {issue_token(referrer)}"})
    assert r.status_code == 200
