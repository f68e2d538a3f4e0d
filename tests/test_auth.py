"""
Authentication flows over HTTP: signup, login, sessions, email confirmation
and password management.
"""


class TestSignupAndLogin:

    async def test_signup_returns_user_and_session(self, client, fake_email):
        response = await client.post("/signup", json={
            "fullName": "  Ada Lovelace ",
            "email": "Ada@Example.com",
            "password": "analytical-engine",
        })

        assert response.status_code == 201
        body = response.json()
        assert body["token"]
        assert body["user"]["fullName"] == "Ada Lovelace"
        assert body["user"]["email"] == "ada@example.com"
        assert body["user"]["isEmailConfirmed"] is False
        assert body["user"]["uniqueURL"]
        assert fake_email.confirmations[0]["to"] == "ada@example.com"

    async def test_signup_rejects_duplicate_email(self, client, signup):
        account = await signup()

        response = await client.post("/signup", json={
            "fullName": "Someone Else",
            "email": account.email.upper(),
            "password": "another-password",
        })

        assert response.status_code == 409
        assert response.json()["code"] == "EMAIL_TAKEN"

    async def test_signup_rejects_short_password(self, client):
        response = await client.post("/signup", json={
            "fullName": "Short",
            "email": "short@example.com",
            "password": "abc",
        })

        assert response.status_code == 400

    async def test_signup_rejects_malformed_body(self, client):
        response = await client.post("/signup", json={"email": "not-an-email"})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    async def test_login_with_valid_credentials(self, client, signup):
        account = await signup()

        response = await client.post("/login", json={"email": account.email, "password": account.password})

        assert response.status_code == 200
        assert response.json()["user"]["id"] == account.id
        assert response.json()["token"] != account.token

    async def test_login_failures_are_indistinguishable(self, client, signup):
        account = await signup()

        wrong_password = await client.post("/login", json={"email": account.email, "password": "nope-nope"})
        unknown_email = await client.post("/login", json={"email": "ghost@example.com", "password": "nope-nope"})

        assert wrong_password.status_code == unknown_email.status_code == 400
        assert wrong_password.json()["error"] == unknown_email.json()["error"]


class TestSessions:

    async def test_me_requires_token(self, client):
        response = await client.get("/me")

        assert response.status_code == 401
        assert response.json()["code"] == "AUTHENTICATION_ERROR"

    async def test_garbage_token_is_rejected(self, client):
        response = await client.get("/me", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401

    async def test_logout_revokes_only_current_token(self, client, signup):
        account = await signup()
        second = await client.post("/login", json={"email": account.email, "password": account.password})
        second_headers = {"Authorization": f"Bearer {second.json()['token']}"}

        response = await client.post("/logout", headers=account.headers)

        assert response.status_code == 200
        assert (await client.get("/me", headers=account.headers)).status_code == 401
        assert (await client.get("/me", headers=second_headers)).status_code == 200

    async def test_logout_all_revokes_every_session(self, client, signup):
        account = await signup()
        await client.post("/login", json={"email": account.email, "password": account.password})

        response = await client.post("/logout-all", headers=account.headers)

        assert response.status_code == 200
        assert response.json()["sessionsRevoked"] == 2
        assert (await client.get("/me", headers=account.headers)).status_code == 401


class TestEmailConfirmation:

    async def test_confirm_email_with_issued_token(self, client, signup, confirm_email):
        account = await signup()

        await confirm_email(account)

        me = await client.get("/me", headers=account.headers)
        assert me.json()["isEmailConfirmed"] is True

    async def test_superseded_token_is_rejected(self, client, signup, fake_email):
        account = await signup()
        first_token = fake_email.last_confirmation_token(account.email)

        resend = await client.post("/request-verification-email", headers=account.headers)
        assert resend.status_code == 200

        response = await client.get(f"/confirm-email/{first_token}")
        assert response.status_code == 400

    async def test_resend_refused_once_confirmed(self, client, signup, confirm_email):
        account = await signup()
        await confirm_email(account)

        response = await client.post("/request-verification-email", headers=account.headers)

        assert response.status_code == 400


class TestPasswords:

    async def test_password_reset_flow(self, client, signup, fake_email):
        account = await signup()

        requested = await client.post("/password-reset", json={"email": account.email})
        assert requested.status_code == 200

        token = fake_email.last_reset_token(account.email)
        reset = await client.post(f"/reset-password/{token}", json={"password": "brand-new-secret"})
        assert reset.status_code == 200

        login = await client.post("/login", json={"email": account.email, "password": "brand-new-secret"})
        assert login.status_code == 200

        reused = await client.post(f"/reset-password/{token}", json={"password": "yet-another-one"})
        assert reused.status_code == 400

    async def test_password_reset_for_unknown_email_looks_the_same(self, client, fake_email):
        response = await client.post("/password-reset", json={"email": "nobody@example.com"})

        assert response.status_code == 200
        assert fake_email.resets == []

    async def test_change_password_checks_current_password(self, client, signup):
        account = await signup()

        wrong = await client.patch("/me/change-password", headers=account.headers, json={
            "currentPassword": "not-my-password",
            "newPassword": "something-longer",
        })
        assert wrong.status_code == 400

        ok = await client.patch("/me/change-password", headers=account.headers, json={
            "currentPassword": account.password,
            "newPassword": "something-longer",
        })
        assert ok.status_code == 200
