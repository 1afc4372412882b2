import sys
import unittest
from datetime import timezone
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from skillswap.matching import build_match_proposal, evaluate_match  # noqa: E402
from skillswap.schemas import SkillProfile  # noqa: E402


class MatchEvaluationTests(unittest.TestCase):
    def setUp(self):
        self.alice = SkillProfile(user_id="alice", teaches=["React", "Guitar"], wants=["Python", "Spanish"])
        self.bob = SkillProfile(user_id="bob", teaches=[" python "], wants=["react"])

    def test_result_carries_exchanged_skill_names(self):
        result = evaluate_match(self.alice, self.bob)
        self.assertTrue(result.is_mutual)
        self.assertEqual(result.score, 75)
        self.assertEqual(result.a_teaches_b, ["react"])
        self.assertEqual(result.b_teaches_a, ["python"])

    def test_missing_viewer_is_an_empty_profile(self):
        result = evaluate_match(None, self.bob)
        self.assertFalse(result.is_mutual)
        self.assertEqual(result.score, 0)
        self.assertEqual(result.a_teaches_b, [])

    def test_profile_accepts_original_field_names_and_garbage(self):
        profile = SkillProfile.model_validate(
            {"uid": "carol", "skillsToTeach": ["Spanish", None], "skillsToLearn": "Python"}
        )
        self.assertEqual(profile.user_id, "carol")
        self.assertEqual(profile.wants, [])
        result = evaluate_match(profile, self.alice)
        self.assertEqual(result.a_teaches_b, ["spanish"])
        self.assertFalse(result.is_mutual)

    def test_proposal_is_pending_with_both_directions(self):
        proposal = build_match_proposal("alice", "bob", self.alice, self.bob, post_id="p1", meta={"source": "explore"})
        self.assertEqual(proposal.status, "pending")
        self.assertEqual(proposal.skills.a_teaches_b, ["react"])
        self.assertEqual(proposal.skills.b_teaches_a, ["python"])
        self.assertEqual(proposal.post_id, "p1")
        self.assertEqual(proposal.meta, {"source": "explore"})
        self.assertEqual(proposal.created_at.tzinfo, timezone.utc)

    def test_proposal_with_yourself_is_rejected(self):
        with self.assertRaises(ValueError):
            build_match_proposal("alice", "alice", self.alice, self.alice)


if __name__ == "__main__":
    unittest.main()
