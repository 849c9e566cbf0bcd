"""Remote control panel: HTTP API and SocketIO events."""
import pytest

from pixelgolf.server import RemotePanel


@pytest.fixture
def panel():
    return RemotePanel(host='127.0.0.1', port=0)


@pytest.fixture
def client(panel):
    return panel.app.test_client()


class TestLaunchEndpoint:
    def test_valid_launch_is_queued(self, panel, client):
        response = client.post('/api/launch', json={'power': 60, 'angle': 30})
        assert response.status_code == 200
        assert response.get_json()['status'] == 'success'
        assert panel.pending_launches() == [(60.0, 30.0)]
        assert panel.pending_launches() == []

    def test_launch_disables_panel_until_turn_ends(self, panel, client):
        panel.end_turn()
        client.post('/api/launch', json={'power': 10, 'angle': 10})
        assert panel.snapshot()['turn_active'] is False

        panel.end_turn()
        assert panel.snapshot()['turn_active'] is True

    @pytest.mark.parametrize("body", [
        {'power': 'hard', 'angle': 30},
        {'power': 50},
        [50, 30],
        {'power': None, 'angle': 10},
    ])
    def test_malformed_launch_is_rejected(self, panel, client, body):
        response = client.post('/api/launch', json=body)
        assert response.status_code == 400
        assert response.get_json()['status'] == 'error'
        assert panel.pending_launches() == []

    def test_launch_after_course_end_is_refused(self, panel, client):
        panel.end_course(12)
        response = client.post('/api/launch', json={'power': 80, 'angle': 30})
        assert response.status_code == 409
        assert response.get_json()['status'] == 'error'
        assert panel.pending_launches() == []

    def test_non_json_body_is_rejected(self, client):
        response = client.post('/api/launch', data='power=5', content_type='text/plain')
        assert response.status_code == 400


class TestScoreboard:
    def test_snapshot_tracks_notifier_calls(self, panel, client):
        panel.update_scoreboard(3, 2, 9)
        data = client.get('/api/scoreboard').get_json()
        assert data['hole'] == 3
        assert data['strokes'] == 2
        assert data['total_score'] == 9
        assert data['course_complete'] is False

    def test_course_end_is_terminal_until_next_scoreboard(self, panel, client):
        panel.end_course(21)
        data = client.get('/api/scoreboard').get_json()
        assert data['course_complete'] is True
        assert data['total_score'] == 21
        assert data['turn_active'] is False

        panel.update_scoreboard(1, 0, 0)
        assert panel.snapshot()['course_complete'] is False

    def test_index_serves_control_page(self, client):
        response = client.get('/')
        assert response.status_code == 200
        assert b'LAUNCH' in response.data


class TestSocketEvents:
    def test_connect_sends_status_and_scoreboard(self, panel):
        sio = panel.socketio.test_client(panel.app)
        names = [event['name'] for event in sio.get_received()]
        assert names == ['status', 'scoreboard']

    def test_notifier_events_reach_clients(self, panel):
        sio = panel.socketio.test_client(panel.app)
        sio.get_received()

        panel.update_scoreboard(2, 1, 4)
        panel.end_turn()
        panel.end_course(17)

        received = sio.get_received()
        assert [event['name'] for event in received] == ['scoreboard', 'turn_end', 'course_end']
        assert received[0]['args'][0]['hole'] == 2
        assert received[2]['args'][0] == {'total_score': 17}
