import unittest

from bson import Int64, ObjectId
from pydantic import ValidationError

from apiquery.entities import CODE_REPO_INFO_COLLECTION, CodeRepoInfo


class TestCodeRepoInfoEntity(unittest.TestCase):
    def test_collection_name(self):
        self.assertEqual(CODE_REPO_INFO_COLLECTION, "t_code_repo_info")

    def test_mapped_fields_keep_their_values(self):
        oid = ObjectId()
        doc = {
            "_id": oid,
            "task_id": Int64(10086),
            "build_id": "4f2a9c",
            "url": "http://git.example.com/team/project.git",
            "revision": "a1b2c3d",
            "branch": "master",
            "type": "git",
            "alias_name": "project",
            "repo_white_list": ["src/", "lib/"],
            "create_date": 1616371200000,
            "created_by": "sys",
            "updated_date": 1616374800000,
            "updated_by": "sys",
        }

        info = CodeRepoInfo(**doc)

        self.assertEqual(info.id, oid)
        self.assertEqual(info.task_id, 10086)
        self.assertEqual(info.build_id, "4f2a9c")
        self.assertEqual(info.url, "http://git.example.com/team/project.git")
        self.assertEqual(info.revision, "a1b2c3d")
        self.assertEqual(info.branch, "master")
        self.assertEqual(info.repo_type, "git")
        self.assertEqual(info.alias_name, "project")
        self.assertEqual(info.repo_white_list, ["src/", "lib/"])
        self.assertEqual(info.create_date, 1616371200000)
        self.assertEqual(info.updated_by, "sys")

    def test_nested_repo_list(self):
        info = CodeRepoInfo(
            task_id=1,
            build_id="b1",
            repo_list=[
                {"repo_id": "r1", "url": "u1", "revision": "12", "type": "svn"},
                {"repo_id": "r2", "url": "u2", "branch": "dev", "alias_name": "two"},
            ],
        )

        self.assertEqual(len(info.repo_list), 2)
        self.assertEqual(info.repo_list[0].repo_type, "svn")
        self.assertEqual(info.repo_list[0].branch, "")
        self.assertEqual(info.repo_list[1].alias_name, "two")

    def test_unmapped_fields_are_ignored(self):
        info = CodeRepoInfo(
            task_id=1,
            build_id="b1",
            url="u1",
            _class="com.tencent.bk.codecc.defect.model.CodeRepoInfoEntity",
            scm_extra={"anything": True},
        )

        self.assertEqual(info.url, "u1")
        self.assertFalse(hasattr(info, "scm_extra"))

    def test_missing_optional_fields_are_empty(self):
        info = CodeRepoInfo(task_id=1, build_id="b1")

        self.assertIsNone(info.id)
        self.assertEqual(info.url, "")
        self.assertEqual(info.revision, "")
        self.assertEqual(info.branch, "")
        self.assertEqual(info.repo_type, "")
        self.assertEqual(info.repo_list, [])
        self.assertEqual(info.repo_white_list, [])
        self.assertIsNone(info.create_date)

    def test_null_optional_fields_are_empty(self):
        info = CodeRepoInfo(
            task_id=1, build_id="b1", url=None, branch=None, repo_list=None, repo_white_list=None
        )

        self.assertEqual(info.url, "")
        self.assertEqual(info.branch, "")
        self.assertEqual(info.repo_list, [])
        self.assertEqual(info.repo_white_list, [])

    def test_required_identifiers(self):
        with self.assertRaises(ValidationError):
            CodeRepoInfo(build_id="b1")
        with self.assertRaises(ValidationError):
            CodeRepoInfo(task_id=1)

    def test_type_mismatch_is_rejected(self):
        with self.assertRaises(ValidationError):
            CodeRepoInfo(task_id="not-a-number", build_id="b1")
        with self.assertRaises(ValidationError):
            CodeRepoInfo(task_id=1, build_id=["b1"])


if __name__ == "__main__":
    unittest.main()
