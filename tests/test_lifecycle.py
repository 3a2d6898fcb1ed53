import pytest

from goaltrack import db
from goaltrack.errors import NotFoundError
from goaltrack.models import CompletedGoal, Goal
from goaltrack.services import lifecycle

from conftest import make_goal, register


def test_complete_non_repeatable_goal_moves_it(client, ana):
    goal_id = make_goal(client, ana['headers']).get_json()['id']

    response = client.post(f'/api/completeGoals/{goal_id}', headers=ana['headers'])

    assert response.status_code == 200
    body = response.get_json()
    assert body['message'] == 'Goal completed and moved to completed goals'
    snapshot = body['completedGoal']
    assert snapshot['id'] != goal_id
    assert snapshot['description'] == 'Run 5k'
    assert snapshot['userId'] == ana['id']
    assert isinstance(snapshot['executionDate'], int)

    assert CompletedGoal.query.count() == 1
    assert db.session.get(Goal, goal_id) is None


def test_complete_twice_fails_for_non_repeatable(client, ana):
    goal_id = make_goal(client, ana['headers']).get_json()['id']

    client.post(f'/api/completeGoals/{goal_id}', headers=ana['headers'])
    again = client.post(f'/api/completeGoals/{goal_id}', headers=ana['headers'])

    assert again.status_code == 404
    assert again.get_json() == {'message': 'Goal not found'}
    assert CompletedGoal.query.count() == 1


def test_repeatable_goal_survives_completion(client, ana):
    goal_id = make_goal(client, ana['headers'], repeatable=True).get_json()['id']

    for _ in range(3):
        response = client.post(f'/api/completeGoals/{goal_id}', headers=ana['headers'])
        assert response.status_code == 200

    assert CompletedGoal.query.filter_by(user_id=ana['id']).count() == 3
    assert db.session.get(Goal, goal_id) is not None
    listed = client.get('/api/goals', headers=ana['headers']).get_json()
    assert [g['id'] for g in listed] == [goal_id]


def test_complete_unknown_goal_is_404(client, ana):
    response = client.post('/api/completeGoals/does-not-exist', headers=ana['headers'])

    assert response.status_code == 404
    assert CompletedGoal.query.count() == 0


def test_cannot_complete_someone_elses_goal(client, ana, bob):
    goal_id = make_goal(client, ana['headers']).get_json()['id']

    response = client.post(f'/api/completeGoals/{goal_id}', headers=bob['headers'])

    assert response.status_code == 404
    assert CompletedGoal.query.count() == 0
    assert db.session.get(Goal, goal_id) is not None


def test_completion_does_not_touch_points(client, ana):
    goal_id = make_goal(client, ana['headers']).get_json()['id']

    client.post(f'/api/completeGoals/{goal_id}', headers=ana['headers'])

    user = client.get('/api/user', headers=ana['headers']).get_json()
    assert user['pointCounter'] == 0


def test_snapshot_is_independent_of_source_goal(client, ana):
    goal_id = make_goal(client, ana['headers'], repeatable=True).get_json()['id']
    client.post(f'/api/completeGoals/{goal_id}', headers=ana['headers'])

    client.delete(f'/api/goals/{goal_id}', headers=ana['headers'])

    history = client.get('/api/completedGoals', headers=ana['headers']).get_json()
    assert len(history) == 1
    assert history[0]['description'] == 'Run 5k'


class _StaleGoal:
    """Stands in for a goal read just before a concurrent request removed it."""

    def __init__(self, goal_id, user_id):
        self.id = goal_id
        self.repeatable = False
        self.user_id = user_id

    def snapshot_fields(self):
        return {
            'description': 'Run 5k',
            'points': 10,
            'mulct': 2,
            'deadline': '2025-01-01',
            'repeatable': False,
            'user_id': self.user_id,
        }


def test_lost_race_rolls_back_snapshot(app, client, ana, monkeypatch):
    goal_id = make_goal(client, ana['headers']).get_json()['id']
    client.delete(f'/api/goals/{goal_id}', headers=ana['headers'])

    monkeypatch.setattr(
        lifecycle, 'find_goal', lambda gid, owner_id=None: _StaleGoal(gid, ana['id'])
    )

    with pytest.raises(NotFoundError):
        lifecycle.complete_goal(goal_id, owner_id=ana['id'])

    assert CompletedGoal.query.count() == 0


def test_end_to_end_scenario(client):
    registered = register(client, 'Ana', 'ana@x.com', 'pw')
    assert registered.status_code == 201
    body = registered.get_json()
    headers = {'Authorization': f"Bearer {body['token']}"}

    created = make_goal(
        client,
        headers,
        description='Run 5k',
        points=10,
        mulct=2,
        deadline='2025-01-01',
        repeatable=False,
        userId=body['user']['id'],
    )
    assert created.status_code == 201
    goal_id = created.get_json()['id']

    assert client.post(f'/api/completeGoals/{goal_id}', headers=headers).status_code == 200

    history = client.get('/api/completedGoals', headers=headers).get_json()
    assert [c['description'] for c in history] == ['Run 5k']

    goals = client.get('/api/goals', headers=headers).get_json()
    assert goal_id not in [g['id'] for g in goals]
