import pytest

from goaltrack import create_app, db
from config import Config


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    JWT_SECRET_KEY = 'test-jwt-secret'
    LOG_LEVEL = 'WARNING'


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def register(client, name='Ana', email='ana@x.com', password='pw'):
    return client.post(
        '/api/register',
        json={'name': name, 'email': email, 'password': password},
    )


def auth_headers(token):
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def ana(client):
    body = register(client).get_json()
    return {
        'id': body['user']['id'],
        'token': body['token'],
        'headers': auth_headers(body['token']),
    }


@pytest.fixture
def bob(client):
    body = register(client, name='Bob', email='bob@x.com', password='secret').get_json()
    return {
        'id': body['user']['id'],
        'token': body['token'],
        'headers': auth_headers(body['token']),
    }


def make_goal(client, headers, **overrides):
    payload = {
        'description': 'Run 5k',
        'points': 10,
        'mulct': 2,
        'deadline': '2025-01-01',
        'repeatable': False,
    }
    payload.update(overrides)
    return client.post('/api/goals', json=payload, headers=headers)
