#!/usr/bin/env python3
"""
Unit tests for user and record repositories on in-memory SQLite.
"""

import unittest

from database.models import Skill, User
from database.repositories import EmailAlreadyRegistered
from database.uow import UnitOfWork, placement_uow
from tests import make_session_factory, make_test_engine


class RepositoryTestCase(unittest.TestCase):

    def setUp(self):
        self.engine = make_test_engine()
        self.session_factory = make_session_factory(self.engine)
        self.session = self.session_factory()
        self.uow = UnitOfWork(self.session)
        self.alice = self.uow.users.create_user("Alice", "alice@example.com", "hash-a")
        self.bob = self.uow.users.create_user("Bob", "bob@example.com", "hash-b")
        self.session.commit()

    def tearDown(self):
        self.session.close()
        self.engine.dispose()


class TestUserRepository(RepositoryTestCase):

    def test_create_assigns_id(self):
        self.assertIsNotNone(self.alice.id)
        self.assertNotEqual(self.alice.id, self.bob.id)

    def test_get_by_email(self):
        found = self.uow.users.get_by_email("bob@example.com")
        self.assertEqual(found.id, self.bob.id)
        self.assertIsNone(self.uow.users.get_by_email("nobody@example.com"))

    def test_get_by_id(self):
        self.assertEqual(self.uow.users.get_by_id(self.alice.id).name, "Alice")

    def test_duplicate_email_rejected(self):
        with self.assertRaises(EmailAlreadyRegistered):
            self.uow.users.create_user("Alice Again", "alice@example.com", "hash")

        # session is usable after the rollback
        self.assertEqual(self.session.query(User).count(), 2)


class TestUserRecordRepository(RepositoryTestCase):

    def test_add_and_list_scoped_to_owner(self):
        self.uow.skills.add(self.alice.id, name="Python", level="Advanced")
        self.uow.skills.add(self.alice.id, name="SQL", level="Beginner")
        self.uow.skills.add(self.bob.id, name="Go", level="Intermediate")

        alice_skills = self.uow.skills.list_for_user(self.alice.id)
        self.assertEqual([s.name for s in alice_skills], ["Python", "SQL"])
        self.assertEqual(len(self.uow.skills.list_for_user(self.bob.id)), 1)

    def test_mock_tests_newest_first(self):
        self.uow.mock_tests.add(self.alice.id, test_name="A", score=5, max_score=10, date="2026-01-01")
        self.uow.mock_tests.add(self.alice.id, test_name="B", score=6, max_score=10, date="2026-03-01")
        self.uow.mock_tests.add(self.alice.id, test_name="C", score=7, max_score=10, date="2026-02-01")

        names = [t.test_name for t in self.uow.mock_tests.list_for_user(self.alice.id)]
        self.assertEqual(names, ["B", "C", "A"])

    def test_get_for_user_hides_other_owners(self):
        cert = self.uow.certifications.add(self.alice.id, name="AWS CCP", platform="AWS", date="2026-02-02")

        self.assertIsNotNone(self.uow.certifications.get_for_user(cert.id, self.alice.id))
        self.assertIsNone(self.uow.certifications.get_for_user(cert.id, self.bob.id))

    def test_delete_requires_ownership(self):
        project = self.uow.projects.add(
            self.alice.id, title="Portfolio", technologies="React", status="Completed"
        )

        self.assertEqual(self.uow.projects.delete_for_user(project.id, self.bob.id), 0)
        self.assertEqual(len(self.uow.projects.list_for_user(self.alice.id)), 1)

        self.assertEqual(self.uow.projects.delete_for_user(project.id, self.alice.id), 1)
        self.assertEqual(self.uow.projects.list_for_user(self.alice.id), [])

    def test_deleting_user_cascades_to_records(self):
        self.uow.skills.add(self.bob.id, name="Go", level="Intermediate")
        self.session.commit()

        self.session.delete(self.bob)
        self.session.commit()

        self.assertEqual(self.session.query(Skill).count(), 0)


class TestPlacementUow(unittest.TestCase):

    def setUp(self):
        self.engine = make_test_engine()
        self.session_factory = make_session_factory(self.engine)

    def tearDown(self):
        self.engine.dispose()

    def test_commits_on_success(self):
        with placement_uow(self.session_factory) as uow:
            uow.users.create_user("Carol", "carol@example.com", "hash")

        with placement_uow(self.session_factory) as uow:
            self.assertIsNotNone(uow.users.get_by_email("carol@example.com"))

    def test_rolls_back_on_error(self):
        with self.assertRaises(RuntimeError):
            with placement_uow(self.session_factory) as uow:
                uow.users.create_user("Dave", "dave@example.com", "hash")
                raise RuntimeError("boom")

        with placement_uow(self.session_factory) as uow:
            self.assertIsNone(uow.users.get_by_email("dave@example.com"))


if __name__ == '__main__':
    unittest.main()
