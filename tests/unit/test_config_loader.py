"""
Configuration loader tests.

Covers the happy path plus fail-fast behavior for missing files, invalid
JSON and missing or empty required fields.
"""

import json
import unittest
import tempfile
from pathlib import Path

from spring_deployer.core.config_loader import load_spring_config, load_credentials
from spring_deployer.core.exceptions import ConfigurationError, DeploymentError


def _write(project_dir: Path, name: str, content) -> None:
    text = content if isinstance(content, str) else json.dumps(content)
    (project_dir / name).write_text(text, encoding="utf-8")


VALID_CONFIG = {
    "resource_group": "rg-spring",
    "cluster_name": "spring-cluster",
    "app_name": "gateway",
    "is_public": True,
    "runtime_version": "Java_11",
    "mode": "DEBUG",
    "deployment": {
        "deployment_name": "green",
        "cpu": 2,
        "memory_in_gb": 4,
        "instance_count": 3,
        "jvm_options": "-Xmx2g",
        "environment": {"PORT": 8080},
        "enable_persistent_storage": True
    }
}


class TestLoadSpringConfig(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.project_dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_loads_full_config(self):
        _write(self.project_dir, "config_spring.json", VALID_CONFIG)

        config = load_spring_config(self.project_dir)

        self.assertEqual(config.app_name, "gateway")
        self.assertEqual(config.cluster_name, "spring-cluster")
        self.assertTrue(config.is_public)
        self.assertEqual(config.runtime_version, "Java_11")
        self.assertEqual(config.deployment.deployment_name, "green")
        self.assertEqual(config.deployment.instance_count, 3)
        self.assertEqual(config.deployment.environment, {"PORT": "8080"})
        self.assertTrue(config.is_persistent_storage_enabled())
        self.assertEqual(config.get_deployment_name(), "green")

    def test_minimal_config_defaults(self):
        _write(self.project_dir, "config_spring.json", {
            "resource_group": "rg", "cluster_name": "c", "app_name": "a"
        })

        config = load_spring_config(self.project_dir)

        self.assertFalse(config.is_public)
        self.assertEqual(config.runtime_version, "Java_8")
        self.assertIsNone(config.deployment)
        self.assertFalse(config.is_persistent_storage_enabled())
        self.assertIsNone(config.get_deployment_name())

    def test_empty_deployment_name_is_none(self):
        raw = dict(VALID_CONFIG, deployment={"deployment_name": ""})
        _write(self.project_dir, "config_spring.json", raw)

        self.assertIsNone(load_spring_config(self.project_dir).get_deployment_name())

    def test_missing_file_raises(self):
        with self.assertRaises(ConfigurationError) as cm:
            load_spring_config(self.project_dir)
        self.assertIn("config_spring.json", str(cm.exception))

    def test_invalid_json_raises(self):
        _write(self.project_dir, "config_spring.json", "{not json")

        with self.assertRaises(ConfigurationError) as cm:
            load_spring_config(self.project_dir)
        self.assertIn("Invalid JSON", str(cm.exception))

    def test_non_object_raises(self):
        _write(self.project_dir, "config_spring.json", "[]")

        with self.assertRaises(ConfigurationError):
            load_spring_config(self.project_dir)

    def test_missing_required_field_raises(self):
        for field_name in ("resource_group", "cluster_name", "app_name"):
            raw = {k: v for k, v in VALID_CONFIG.items() if k != field_name}
            _write(self.project_dir, "config_spring.json", raw)

            with self.assertRaises(ConfigurationError) as cm:
                load_spring_config(self.project_dir)
            self.assertIn(field_name, str(cm.exception))

    def test_empty_required_field_raises(self):
        _write(self.project_dir, "config_spring.json", dict(VALID_CONFIG, app_name=""))

        with self.assertRaises(ConfigurationError) as cm:
            load_spring_config(self.project_dir)
        self.assertIn("cannot be empty", str(cm.exception))

    def test_invalid_environment_raises(self):
        raw = dict(VALID_CONFIG, deployment={"environment": ["A=1"]})
        _write(self.project_dir, "config_spring.json", raw)

        with self.assertRaises(ConfigurationError):
            load_spring_config(self.project_dir)

    def test_configuration_error_is_deployment_error(self):
        with self.assertRaises(DeploymentError):
            load_spring_config(self.project_dir)


class TestLoadCredentials(unittest.TestCase):

    def test_missing_credentials_returns_empty(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            self.assertEqual(load_credentials(Path(tmpdir)), {})

    def test_loads_credentials(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            _write(Path(tmpdir), "config_credentials_azure.json", {"azure_subscription_id": "sub-1"})
            self.assertEqual(load_credentials(Path(tmpdir)), {"azure_subscription_id": "sub-1"})
