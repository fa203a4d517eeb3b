#!/usr/bin/env python3
"""
Unit tests for web configuration loading.
"""

import os
import tempfile
import unittest
from unittest.mock import patch

import yaml

from core.readiness import InvalidMockTestPolicy
from web.backend.config import AppConfig, get_config


class TestWebConfig(unittest.TestCase):

    def setUp(self):
        get_config.cache_clear()
        self.tmp_dir = tempfile.TemporaryDirectory()
        # Point at a file that does not exist so only defaults and env apply
        self.env = {"PLACEMENTIQ_CONFIG": os.path.join(self.tmp_dir.name, "missing.yaml")}

    def tearDown(self):
        get_config.cache_clear()
        self.tmp_dir.cleanup()

    def test_defaults(self):
        with patch.dict(os.environ, self.env, clear=True):
            config = get_config()

        self.assertIsInstance(config, AppConfig)
        self.assertEqual(config.database.url, "sqlite:///placement_iq.db")
        self.assertEqual(config.web.port, 3000)
        self.assertEqual(config.auth.cookie_name, "token")
        self.assertTrue(config.auth.cookie_secure)
        self.assertEqual(config.readiness.invalid_mock_test_policy, InvalidMockTestPolicy.ZERO)

    def test_env_overrides(self):
        env = dict(self.env)
        env.update({
            "DATABASE_URL": "sqlite:///override.db",
            "WEB_PORT": "9000",
            "JWT_SECRET": "from-env",
            "AUTH_COOKIE_SECURE": "false",
            "READINESS_INVALID_MOCK_TEST_POLICY": "STRICT",
        })
        with patch.dict(os.environ, env, clear=True):
            config = get_config()

        self.assertEqual(config.database.url, "sqlite:///override.db")
        self.assertEqual(config.web.port, 9000)
        self.assertEqual(config.auth.jwt_secret, "from-env")
        self.assertFalse(config.auth.cookie_secure)
        self.assertEqual(config.readiness.invalid_mock_test_policy, InvalidMockTestPolicy.STRICT)

    def test_yaml_file(self):
        path = os.path.join(self.tmp_dir.name, "config.yaml")
        with open(path, "w") as f:
            yaml.safe_dump({
                "web": {"host": "127.0.0.1"},
                "auth": {"token_ttl_hours": 2, "cookie_samesite": "lax"},
            }, f)

        with patch.dict(os.environ, {"PLACEMENTIQ_CONFIG": path}, clear=True):
            config = get_config()

        self.assertEqual(config.web.host, "127.0.0.1")
        self.assertEqual(config.auth.token_ttl_hours, 2)
        self.assertEqual(config.auth.cookie_samesite, "lax")

    def test_cached(self):
        with patch.dict(os.environ, self.env, clear=True):
            self.assertIs(get_config(), get_config())


if __name__ == '__main__':
    unittest.main()
