"""Tests for the command-line interface

"""
import unittest
from unittest.mock import patch

from typer.testing import CliRunner

from flashstore.config import DevelopmentConfig, ProductionConfig
from flashstore.run import app


class TestCli(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()

    def _last_line(self, output):
        return [line for line in output.splitlines() if line.strip()][-1].strip()

    def test_gen_salt(self):
        result = self.runner.invoke(app, ['gen-salt'])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(len(self._last_line(result.output)), 8)

    def test_sign_and_verify_token(self):
        result = self.runner.invoke(app, ['sign-token', '{"info": "Welcome"}'])
        self.assertEqual(result.exit_code, 0, result.output)
        token = self._last_line(result.output)

        result = self.runner.invoke(app, ['verify-token', token])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('Welcome', result.output)

    def test_sign_token_rejects_non_object(self):
        result = self.runner.invoke(app, ['sign-token', '["info"]'])
        self.assertEqual(result.exit_code, 1)

    def test_sign_token_rejects_invalid_json(self):
        result = self.runner.invoke(app, ['sign-token', '{info'])
        self.assertEqual(result.exit_code, 1)
        self.assertIn('Invalid JSON', result.output)

    def test_verify_token_rejects_garbage(self):
        result = self.runner.invoke(app, ['verify-token', 'garbage'])
        self.assertEqual(result.exit_code, 1)
        self.assertIn('invalid or expired', result.output)

    def test_sign_token_without_salt_reports_configuration_error(self):
        with patch.object(DevelopmentConfig, 'FLASH_SIGNED_COOKIE', False), \
                patch.object(DevelopmentConfig, 'FLASH_SIGNING_SALT', None):
            result = self.runner.invoke(app, ['sign-token', '{"info": "Welcome"}'])
        self.assertEqual(result.exit_code, 1)
        self.assertIn('no signing salt found', result.output)

    def test_verify_token_without_salt_reports_configuration_error(self):
        with patch.object(DevelopmentConfig, 'FLASH_SIGNED_COOKIE', False), \
                patch.object(DevelopmentConfig, 'FLASH_SIGNING_SALT', None):
            result = self.runner.invoke(app, ['verify-token', 'garbage'])
        self.assertEqual(result.exit_code, 1)
        self.assertIn('no signing salt found', result.output)

    def test_config_check_development(self):
        result = self.runner.invoke(app, ['config-check'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('FLASH_SIGNING_SALT', result.output)

    def test_config_check_production_without_salt(self):
        with patch.object(ProductionConfig, 'FLASH_SIGNING_SALT', None):
            result = self.runner.invoke(app, ['config-check', '--config', 'production'])
        self.assertEqual(result.exit_code, 1)
        self.assertIn('no signing salt found', result.output)

    def test_routes(self):
        with patch.object(DevelopmentConfig, 'SECURITY_HEADERS_ENABLED', False):
            result = self.runner.invoke(app, ['routes'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('/handoff', result.output)


if __name__ == '__main__':
    unittest.main()
