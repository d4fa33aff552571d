"""Shared test fixtures for flashstore tests

"""
import unittest

from flask import Flask, jsonify, render_template_string, request

from flashstore.config import TestingConfig
from flashstore.flash import SESSION_KEY, FlashStore, clear_flash, get_flash, put_flash


class BaseFlashTestCase(unittest.TestCase):
    """Base test case with a bare Flask app, a FlashStore and helper routes"""

    config_class = TestingConfig
    config_overrides = {}

    def setUp(self):
        """Set up app, flash store and test client"""
        self.app = Flask(__name__)
        self.app.config.from_object(self.config_class)
        self.app.config.update(self.config_overrides)
        self.store = FlashStore(self.app)
        self._register_routes()
        self.client = self.app.test_client()

    def _register_routes(self):
        app = self.app

        def _status():
            return int(request.args.get('status', 200))

        @app.route('/show')
        def show():
            return jsonify(get_flash()), _status()

        @app.route('/put/<key>/<message>')
        def put(key, message):
            put_flash(key, message)
            return '', _status()

        @app.route('/clear')
        def clear():
            clear_flash()
            return '', _status()

        @app.route('/fail')
        def fail():
            put_flash('info', 'New')
            raise RuntimeError('handler failed')

        @app.route('/render')
        def render():
            return render_template_string("{{ get_flash('info') or '' }}")

    def get_session_flash(self):
        """Helper to read the flash persisted in the client's session"""
        with self.client.session_transaction() as sess:
            return sess.get(SESSION_KEY)

    def set_session_flash(self, flash):
        """Helper to seed the client's session with a persisted flash"""
        with self.client.session_transaction() as sess:
            sess[SESSION_KEY] = flash
