"""Unit tests for signed flash tokens

"""
import unittest
from unittest.mock import patch

from flask import Flask, Response
from itsdangerous import URLSafeTimedSerializer

from flashstore.tokens import (
    COOKIE_NAME,
    SALT_LENGTH,
    TOKEN_MAX_AGE,
    computed_salt,
    random_signing_salt,
    set_flash_cookie,
    sign_token,
    verify_token,
)


class TestFlashTokens(unittest.TestCase):

    def setUp(self):
        self.app = Flask(__name__)
        self.app.config['SECRET_KEY'] = 'test-secret-key'

    def test_salt_is_derived_with_flash_suffix(self):
        self.assertEqual(computed_salt('abc'), 'abcflash')

    def test_signed_token_verifies(self):
        token = sign_token(self.app, 'test-salt', {'info': 'Welcome'})
        self.assertEqual(verify_token(self.app, 'test-salt', token), {'info': 'Welcome'})

    def test_token_is_bound_to_salt(self):
        token = sign_token(self.app, 'test-salt', {'info': 'Welcome'})
        self.assertIsNone(verify_token(self.app, 'other-salt', token))

    def test_token_is_bound_to_secret_key(self):
        token = sign_token(self.app, 'test-salt', {'info': 'Welcome'})
        other_app = Flask(__name__)
        other_app.config['SECRET_KEY'] = 'another-secret-key'
        self.assertIsNone(verify_token(other_app, 'test-salt', token))

    def test_tampered_token_is_rejected(self):
        token = sign_token(self.app, 'test-salt', {'info': 'Welcome'})
        tampered = token[:-2] + ('AA' if not token.endswith('AA') else 'BB')
        self.assertIsNone(verify_token(self.app, 'test-salt', tampered))

    def test_garbage_token_is_rejected(self):
        self.assertIsNone(verify_token(self.app, 'test-salt', 'not-a-token'))

    def test_expired_token_is_rejected(self):
        with patch('time.time', return_value=1_000_000):
            token = sign_token(self.app, 'test-salt', {'info': 'Welcome'})

        with patch('time.time', return_value=1_000_000 + TOKEN_MAX_AGE - 1):
            self.assertEqual(verify_token(self.app, 'test-salt', token), {'info': 'Welcome'})

        with patch('time.time', return_value=1_000_000 + TOKEN_MAX_AGE + 1):
            self.assertIsNone(verify_token(self.app, 'test-salt', token))

    def test_non_mapping_payload_is_rejected(self):
        serializer = URLSafeTimedSerializer('test-secret-key', salt=computed_salt('test-salt'))
        token = serializer.dumps(['info', 'Welcome'])
        self.assertIsNone(verify_token(self.app, 'test-salt', token))

    def test_sign_requires_mapping(self):
        with self.assertRaises(TypeError):
            sign_token(self.app, 'test-salt', ['info', 'Welcome'])

    def test_set_flash_cookie(self):
        response = set_flash_cookie(Response(status=302), self.app, 'test-salt', {'info': 'Welcome'})
        cookie = response.headers['Set-Cookie']
        self.assertTrue(cookie.startswith(f'{COOKIE_NAME}='))
        self.assertIn(f'Max-Age={TOKEN_MAX_AGE}', cookie)
        self.assertIn('HttpOnly', cookie)
        self.assertIn('SameSite=Lax', cookie)

    def test_random_signing_salt(self):
        salt = random_signing_salt()
        self.assertEqual(len(salt), SALT_LENGTH)
        self.assertNotEqual(salt, random_signing_salt())
        self.assertEqual(len(random_signing_salt(4)), 4)


if __name__ == '__main__':
    unittest.main()
