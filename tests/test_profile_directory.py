import json
import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from skillswap.profiles.local_directory import LocalProfileDirectory  # noqa: E402

FIXTURE_PATH = Path(__file__).resolve().parent / "fixtures" / "profiles.json"


class LocalProfileDirectoryTests(unittest.TestCase):
    def test_profiles_use_original_field_names(self):
        directory = LocalProfileDirectory(FIXTURE_PATH)
        alice = directory.get_profile("alice")
        self.assertIsNotNone(alice)
        self.assertEqual(alice.user_id, "alice")
        self.assertEqual(alice.teaches, ["React", "Guitar"])
        self.assertEqual(alice.wants, ["Python"])

    def test_malformed_skill_lists_degrade_to_empty(self):
        carol = LocalProfileDirectory(FIXTURE_PATH).get_profile("carol")
        self.assertEqual(carol.wants, [])

    def test_posts_skip_non_objects(self):
        posts = LocalProfileDirectory(FIXTURE_PATH).list_posts()
        self.assertEqual([post.post_id for post in posts], ["p1", "p2", "p3", "p4"])
        self.assertEqual(posts[0].user_id, "bob")
        self.assertEqual(posts[0].author_name, "Bob Tran")

    def test_unknown_user(self):
        self.assertIsNone(LocalProfileDirectory(FIXTURE_PATH).get_profile("nobody"))

    def test_missing_file_is_an_empty_directory(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertLogs("skillswap.profiles.local_directory", level="WARNING"):
                directory = LocalProfileDirectory(Path(tmp) / "missing.json")
        self.assertEqual(directory.list_posts(), [])

    def test_invalid_json_raises(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "broken.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(RuntimeError):
                LocalProfileDirectory(path)

    def test_top_level_must_be_object(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "list.json"
            path.write_text(json.dumps([1, 2]), encoding="utf-8")
            with self.assertRaises(RuntimeError):
                LocalProfileDirectory(path)


if __name__ == "__main__":
    unittest.main()
