import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.analysis.feedback import FeedbackThresholds, get_feedback_thresholds
from app.analysis.scoring import ScoringWeights, get_scoring_weights
from app.core.config.scoring import (
    clear_scoring_config_cache,
    get_scoring_config,
    get_scoring_value,
)


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("resume_score.skills.cap"), 25)
        self.assertEqual(get_scoring_value("resume_score.action_verbs.per_item"), 1.5)
        self.assertIsNone(get_scoring_value("resume_score.unknown.key"))
        self.assertEqual(get_scoring_value("", "fallback"), "fallback")

    def test_shipped_config_matches_built_in_defaults(self):
        self.assertEqual(get_scoring_weights(), ScoringWeights())
        self.assertEqual(get_feedback_thresholds(), FeedbackThresholds())

    def test_bucket_maxima_add_up_to_one_hundred(self):
        weights = get_scoring_weights()
        total = (
            weights.email
            + weights.phone
            + weights.linkedin
            + weights.github
            + weights.skills_cap
            + weights.action_verbs_cap
            + weights.required_section_weight * len(weights.required_sections)
            + weights.optional_section_weight * len(weights.optional_sections)
            + weights.length_step * len(weights.length_thresholds)
            + weights.quantifiables_cap
        )
        self.assertEqual(total, 100)

    def test_clearing_cache_reloads_weights_and_thresholds(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scoring.yaml"
            path.write_text(
                "resume_score:\n"
                "  contact:\n"
                "    email: 7\n"
                "feedback:\n"
                "  strong_skill_count: 12\n",
                encoding="utf-8",
            )
            with patch("app.core.config.scoring.settings") as patched_settings:
                patched_settings.scoring_config_path = str(path)
                clear_scoring_config_cache()
                try:
                    weights = get_scoring_weights()
                    self.assertEqual(weights.email, 7)
                    self.assertEqual(weights.phone, ScoringWeights().phone)
                    self.assertEqual(get_feedback_thresholds().strong_skill_count, 12)
                finally:
                    clear_scoring_config_cache()

        self.assertEqual(get_scoring_weights(), ScoringWeights())
        self.assertEqual(get_feedback_thresholds(), FeedbackThresholds())

    def test_missing_file_falls_back_to_defaults(self):
        with patch("app.core.config.scoring.settings") as patched_settings:
            patched_settings.scoring_config_path = "/nonexistent/scoring.yaml"
            clear_scoring_config_cache()
            try:
                self.assertEqual(get_scoring_config(), {})
                self.assertEqual(get_scoring_weights(), ScoringWeights())
            finally:
                clear_scoring_config_cache()


if __name__ == "__main__":
    unittest.main()
