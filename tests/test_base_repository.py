import unittest

from bson import ObjectId

from apiquery.entities.code_repo_info import CodeRepoInfo
from apiquery.repositories.base import BaseRepository
from tests.fake_mongo import FakeDatabase


class TestBaseRepository(unittest.TestCase):
    def setUp(self):
        self.oid = ObjectId()
        self.db = FakeDatabase(
            {
                "t_code_repo_info": [
                    {"_id": self.oid, "task_id": 1, "build_id": "b1", "url": "u1"},
                    {"task_id": 2, "build_id": "b1", "url": "u2"},
                ]
            }
        )
        self.repo = BaseRepository(self.db, "t_code_repo_info", CodeRepoInfo)

    def test_find_by_id(self):
        self.assertEqual(self.repo.find_by_id(str(self.oid)).url, "u1")
        self.assertEqual(self.repo.find_by_id(self.oid).url, "u1")
        self.assertIsNone(self.repo.find_by_id(ObjectId()))
        self.assertIsNone(self.repo.find_by_id("not-an-object-id"))

    def test_find_one(self):
        self.assertEqual(self.repo.find_one({"task_id": 2}).url, "u2")
        self.assertIsNone(self.repo.find_one({"task_id": 3}))

    def test_find_many_with_limit(self):
        self.assertEqual(len(self.repo.find_many({"build_id": "b1"})), 2)
        self.assertEqual(
            len(self.repo.find_many({"build_id": "b1"}, sort=[("task_id", 1)], limit=1)), 1
        )

    def test_count(self):
        self.assertEqual(self.repo.count({"build_id": "b1"}), 2)


if __name__ == "__main__":
    unittest.main()
