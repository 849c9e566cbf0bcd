# server.py
"""
Remote control panel.

Serves a small web page with power/angle sliders, a LAUNCH button and a live
scoreboard. Launch requests are only queued here; the game loop drains the
queue at the start of each frame, so the simulation is never touched from the
server thread.
"""
import queue
import threading

from flask import Flask, request, jsonify, render_template
from flask_socketio import SocketIO, emit

from pixelgolf.config import CONFIG
from pixelgolf.course import Notifier


class RemotePanel(Notifier):
    def __init__(self, host=None, port=None):
        self.host = host or CONFIG['server_host']
        self.port = int(port or CONFIG['server_port'])

        self.app = Flask(__name__)
        self.app.config['SECRET_KEY'] = 'pixel_golf_panel'
        self.socketio = SocketIO(self.app, cors_allowed_origins="*", async_mode='threading')

        self.launch_queue = queue.Queue()
        self._server_thread = None
        self._data_lock = threading.Lock()
        self._scoreboard = {
            'hole': 1,
            'strokes': 0,
            'total_score': 0,
            'turn_active': False,
            'course_complete': False,
        }
        self._register_routes()

    # ---- HTTP / SocketIO ----
    def _register_routes(self):
        app, socketio = self.app, self.socketio

        @app.route('/')
        def index():
            """Control page"""
            return render_template('panel.html')

        @app.route('/api/launch', methods=['POST'])
        def launch():
            """Queue a launch for the next frame"""
            data = request.get_json(silent=True)
            try:
                if not isinstance(data, dict):
                    raise ValueError("expected a JSON object")
                power = float(data['power'])
                angle = float(data['angle'])
            except (KeyError, TypeError, ValueError) as e:
                print(f"[WARNING] Rejected launch request: {e!r}")
                return jsonify({'status': 'error', 'message': f"invalid launch: {e}"}), 400

            with self._data_lock:
                if self._scoreboard['course_complete']:
                    return jsonify({'status': 'error', 'message': 'Course complete'}), 409
                self._scoreboard['turn_active'] = False
            self.launch_queue.put((power, angle))
            return jsonify({'status': 'success', 'message': 'Launch queued'})

        @app.route('/api/scoreboard')
        def scoreboard():
            """Latest scoreboard snapshot"""
            return jsonify(self.snapshot())

        @socketio.on('connect')
        def handle_connect():
            print('[SERVER] Panel connected')
            emit('status', {'message': 'Connected to pixel golf'})
            emit('scoreboard', self.snapshot())

        @socketio.on('disconnect')
        def handle_disconnect():
            print('[SERVER] Panel disconnected')

    def snapshot(self) -> dict:
        with self._data_lock:
            return dict(self._scoreboard)

    def pending_launches(self):
        """Drains every queued (power, angle) request."""
        launches = []
        while True:
            try:
                launches.append(self.launch_queue.get_nowait())
            except queue.Empty:
                return launches

    # ---- Notifier ----
    def update_scoreboard(self, hole, strokes, total_score):
        with self._data_lock:
            self._scoreboard.update(hole=hole, strokes=strokes, total_score=total_score,
                                    course_complete=False)
        self.socketio.emit('scoreboard', self.snapshot())

    def end_turn(self):
        with self._data_lock:
            self._scoreboard['turn_active'] = True
        self.socketio.emit('turn_end', self.snapshot())

    def end_course(self, total_score):
        with self._data_lock:
            self._scoreboard.update(total_score=total_score, turn_active=False,
                                    course_complete=True)
        self.socketio.emit('course_end', {'total_score': total_score})

    # ---- Lifecycle ----
    def _server_loop(self):
        self.socketio.run(self.app, host=self.host, port=self.port,
                          use_reloader=False, log_output=False,
                          allow_unsafe_werkzeug=True)

    def start(self):
        if self._server_thread is not None:
            return
        # Daemon thread: the server goes down with the game window
        self._server_thread = threading.Thread(target=self._server_loop, daemon=True)
        self._server_thread.start()
        print(f"[SERVER] Control panel: http://localhost:{self.port}")
