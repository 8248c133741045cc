"""
Tests for cookie based authentication
"""
from society_cms.models import User, UserRole
from society_cms.services.auth import auth_service


async def create_user(db_session, email='member@tamilsociety.org', password='secret-pass', **kwargs) -> User:
    user = User(
        email=email,
        name='Member',
        hashed_password=auth_service.hash_password(password),
        role=kwargs.pop('role', UserRole.ADMIN),
        **kwargs,
    )
    db_session.add(user)
    await db_session.commit()
    return user


def test_password_hashing():
    hashed = auth_service.hash_password('secret-pass')

    assert hashed != 'secret-pass'
    assert auth_service.verify_password('secret-pass', hashed)
    assert not auth_service.verify_password('wrong', hashed)


async def test_token_types_are_not_interchangeable(admin_user):
    access = auth_service.create_access_token(admin_user.id, admin_user.email)
    refresh = auth_service.create_refresh_token(admin_user.id, admin_user.email)

    assert auth_service.verify_access_token(access)['sub'] == str(admin_user.id)
    assert auth_service.verify_access_token(refresh) is None
    assert auth_service.verify_refresh_token(access) is None
    assert auth_service.decode_token('garbage') is None


class TestLogin:
    async def test_login_sets_cookies(self, client, db_session):
        await create_user(db_session)

        response = await client.post(
            '/api/v1/auth/login', json={'email': 'member@tamilsociety.org', 'password': 'secret-pass'}
        )

        assert response.status_code == 200
        assert response.json()['data']['email'] == 'member@tamilsociety.org'
        assert response.json()['data']['role'] == 'admin'
        assert 'access_token' in response.cookies
        assert 'refresh_token' in response.cookies

    async def test_wrong_password(self, client, db_session):
        await create_user(db_session)

        response = await client.post(
            '/api/v1/auth/login', json={'email': 'member@tamilsociety.org', 'password': 'nope'}
        )

        assert response.status_code == 401
        assert response.json() == {'success': False, 'error': 'Invalid email or password'}

    async def test_inactive_user(self, client, db_session):
        await create_user(db_session, is_active=False)

        response = await client.post(
            '/api/v1/auth/login', json={'email': 'member@tamilsociety.org', 'password': 'secret-pass'}
        )

        assert response.status_code == 403

    async def test_invalid_email(self, client):
        response = await client.post('/api/v1/auth/login', json={'email': 'not-an-email', 'password': 'x'})

        assert response.status_code == 400


class TestSession:
    async def test_me(self, admin_client, admin_user):
        response = await admin_client.get('/api/v1/auth/me')

        assert response.status_code == 200
        assert response.json()['data']['id'] == str(admin_user.id)

    async def test_me_without_cookie(self, client):
        response = await client.get('/api/v1/auth/me')

        assert response.status_code == 401

    async def test_inactive_admin_is_refused(self, client, db_session):
        user = await create_user(db_session, is_active=False)
        client.cookies.set('access_token', auth_service.create_access_token(user.id, user.email))

        response = await client.post('/api/v1/slideshows', json={'name': 'Events', 'pages': ['events']})
        assert response.status_code == 401
        assert response.json()['error'] == 'Unauthorized - Admin access required'

        response = await client.get('/api/v1/auth/me')
        assert response.status_code == 403

    async def test_refresh(self, client, admin_user):
        client.cookies.set('refresh_token', auth_service.create_refresh_token(admin_user.id, admin_user.email))

        response = await client.post('/api/v1/auth/refresh')

        assert response.status_code == 200
        assert 'access_token' in response.cookies

    async def test_refresh_rejects_access_token(self, client, admin_user):
        client.cookies.set('refresh_token', auth_service.create_access_token(admin_user.id, admin_user.email))

        response = await client.post('/api/v1/auth/refresh')

        assert response.status_code == 401

    async def test_logout(self, client):
        response = await client.post('/api/v1/auth/logout')

        assert response.status_code == 200
        assert response.json()['message'] == 'Successfully logged out'


async def test_health(client):
    response = await client.get('/health')

    assert response.json() == {'status': 'healthy', 'service': 'society-cms'}


async def test_unknown_route_uses_envelope(client):
    response = await client.get('/api/v1/nothing-here')

    assert response.status_code == 404
    assert response.json() == {'success': False, 'error': 'Not Found'}
