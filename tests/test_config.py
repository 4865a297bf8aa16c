import unittest
import os
import yaml
from unittest.mock import patch, mock_open
from pydantic import ValidationError

from career_crush.config_loader import (
    load_config,
    AppConfig,
    PriorityWeights,
    ScorerConfig,
)
from career_crush.scorer.weights import DEFAULT_PRIORITY_WEIGHTS


class TestConfigLoader(unittest.TestCase):

    def setUp(self):
        self.sample_config = {
            "scorer": {
                "neutral_score": 55,
                "mismatch_score": 25,
                "salary_gap_tolerance": 0.2,
                "default_priority_weights": {
                    "location": 30,
                    "salary": 30,
                    "role_type": 10,
                    "industry": 10,
                    "company_size": 0,
                    "work_style": 20,
                },
                "extra_regions": {"Pacific Northwest": ["Seattle", "Portland"]},
            },
            "ranking": {"min_score": 60, "top_k": 5},
            "logging": {"level": "DEBUG"},
        }
        self.config_yaml = yaml.dump(self.sample_config)

    def test_load_config_default(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                config = load_config("dummy_path.yaml")
                self.assertIsInstance(config, AppConfig)
                self.assertEqual(config.scorer.neutral_score, 55)
                self.assertEqual(config.scorer.mismatch_score, 25)
                self.assertEqual(config.scorer.flexible_remote_score, 80)
                self.assertEqual(config.scorer.default_priority_weights.location, 30)
                self.assertEqual(config.ranking.top_k, 5)
                self.assertEqual(config.logging.level, "DEBUG")

    def test_env_var_override_log_level(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"LOG_LEVEL": "warning"}):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.logging.level, "WARNING")

    def test_env_var_override_config_path(self):
        opener = mock_open(read_data=self.config_yaml)
        with patch("builtins.open", opener):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"CAREER_CRUSH_CONFIG": "/etc/crush.yaml"}):
                    load_config("dummy_path.yaml")
                    opener.assert_called_once_with("/etc/crush.yaml", "r")

    def test_missing_file_uses_defaults(self):
        opener = mock_open()
        with patch("builtins.open", opener):
            with patch("os.path.exists", return_value=False):
                config = load_config("missing.yaml")
        opener.assert_not_called()
        self.assertEqual(config.scorer.neutral_score, 50)
        self.assertEqual(config.scorer.default_priority_weights.as_dict(), dict(DEFAULT_PRIORITY_WEIGHTS))
        self.assertEqual(config.ranking.min_score, 0)
        self.assertEqual(config.logging.level, "INFO")

    def test_empty_file_uses_defaults(self):
        with patch("builtins.open", mock_open(read_data="")):
            with patch("os.path.exists", return_value=True):
                config = load_config("empty.yaml")
                self.assertEqual(config.scorer.mismatch_score, 30)

    def test_invalid_weights_rejected(self):
        self.sample_config["scorer"]["default_priority_weights"]["salary"] = 31
        bad_yaml = yaml.dump(self.sample_config)
        with patch("builtins.open", mock_open(read_data=bad_yaml)):
            with patch("os.path.exists", return_value=True):
                with self.assertRaises(ValidationError):
                    load_config("dummy_path.yaml")

    def test_non_mapping_file_rejected(self):
        with patch("builtins.open", mock_open(read_data="- scorer\n- ranking\n")):
            with patch("os.path.exists", return_value=True):
                with self.assertRaises(ValueError):
                    load_config("dummy_path.yaml")

    def test_invalid_score_rejected(self):
        with self.assertRaises(ValidationError):
            ScorerConfig(neutral_score=150)
        with self.assertRaises(ValidationError):
            ScorerConfig(salary_gap_tolerance=0)


class TestScorerConfig(unittest.TestCase):

    def test_priority_weight_defaults(self):
        weights = PriorityWeights()
        self.assertEqual(weights.as_dict(), dict(DEFAULT_PRIORITY_WEIGHTS))

    def test_region_mapping_merges_extras(self):
        config = ScorerConfig(extra_regions={
            "Pacific Northwest": ["Seattle", " Portland "],
            "South": ["Huntsville"],
        })
        regions = config.region_mapping()

        self.assertEqual(regions["pacific northwest"], ["seattle", "portland"])
        self.assertIn("huntsville", regions["south"])
        self.assertIn("nashville", regions["south"])

    def test_region_mapping_does_not_touch_builtin_table(self):
        ScorerConfig(extra_regions={"South": ["Huntsville"]}).region_mapping()
        self.assertNotIn("huntsville", ScorerConfig().region_mapping()["south"])


if __name__ == '__main__':
    unittest.main()
