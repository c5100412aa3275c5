"""Tests for the filter repository."""

import shutil
import sqlite3
import sys
import tempfile
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from task_filters.database import FilterDatabase
from task_filters.exceptions import StorageConstraintError, StorageUnavailableError
from task_filters.models.domain import Filter
from task_filters.repositories import FilterRepository, FilterStore, Repository


class TestFilterRepository(unittest.TestCase):
    """Test CRUD access to the filters table."""

    def setUp(self):
        """Create a repository over a temporary database."""
        self.temp_dir = tempfile.mkdtemp()
        self.db_path = Path(self.temp_dir) / 'filters.db'
        self.repo = FilterRepository(FilterDatabase(self.db_path))

    def tearDown(self):
        """Clean up temporary files."""
        shutil.rmtree(self.temp_dir)

    def _work_filter(self):
        return Filter(
            title="Work",
            sql="WHERE tasks.deleted = 0 AND tags.name = 'work'",
            values='{"tags": ["work"]}',
            criterion="tag\twork",
            color=3,
            icon=12,
            order=1
        )

    def test_is_a_repository(self):
        """FilterStore is the repository and implements the base contract."""
        self.assertIs(FilterStore, FilterRepository)
        self.assertIsInstance(self.repo, Repository)

    def test_insert_then_get_by_id(self):
        """A stored filter reads back equal except for the assigned id."""
        work = self._work_filter()
        filter_id = self.repo.insert(work)

        self.assertIsInstance(filter_id, int)
        self.assertEqual(self.repo.get_by_id(filter_id), work.with_id(filter_id))

    def test_insert_does_not_modify_argument(self):
        """Insert leaves the passed filter untouched."""
        work = self._work_filter()
        self.repo.insert(work)
        self.assertIsNone(work.id)

    def test_insert_assigns_increasing_ids(self):
        """Each insert gets a new id."""
        first = self.repo.insert(Filter(title="Home"))
        second = self.repo.insert(Filter(title="home"))

        self.assertEqual(first, 1)
        self.assertEqual(second, 2)
        self.assertEqual(self.repo.count(), 2)

    def test_insert_with_explicit_id(self):
        """A filter carrying an id is stored under that id."""
        filter_id = self.repo.insert(Filter(id=42, title="Someday"))

        self.assertEqual(filter_id, 42)
        self.assertEqual(self.repo.get_by_id(42).title, "Someday")

    def test_insert_duplicate_id_raises_constraint_error(self):
        """The engine rejects a second row with the same id."""
        self.repo.insert(Filter(id=7, title="First"))

        with self.assertRaises(StorageConstraintError) as context:
            self.repo.insert(Filter(id=7, title="Second"))

        self.assertIsInstance(context.exception.__cause__, sqlite3.IntegrityError)
        self.assertEqual(context.exception.details['operation'], 'insert')
        self.assertEqual(self.repo.count(), 1)
        self.assertEqual(self.repo.get_by_id(7).title, "First")

    def test_insert_null_order_raises_constraint_error(self):
        """f_order is NOT NULL."""
        with self.assertRaises(StorageConstraintError):
            self.repo.insert(Filter(title="Broken", order=None))
        self.assertEqual(self.repo.count(), 0)

    def test_update_overwrites_row(self):
        """After update, get_by_id returns the new values."""
        filter_id = self.repo.insert(self._work_filter())
        changed = Filter(
            id=filter_id,
            title="Office",
            sql="WHERE tags.name = 'office'",
            values=None,
            criterion=None,
            color=5,
            icon=2,
            order=9
        )

        self.repo.update(changed)

        self.assertEqual(self.repo.get_by_id(filter_id), changed)

    def test_update_missing_row_is_noop(self):
        """Updating an id that is not stored changes nothing."""
        filter_id = self.repo.insert(self._work_filter())

        self.repo.update(Filter(id=999, title="Ghost"))

        self.assertIsNone(self.repo.get_by_id(999))
        self.assertEqual(self.repo.get_all(), [self._work_filter().with_id(filter_id)])

    def test_update_constraint_violation_keeps_row(self):
        """A rejected update is rolled back."""
        filter_id = self.repo.insert(self._work_filter())

        with self.assertRaises(StorageConstraintError):
            self.repo.update(Filter(id=filter_id, title="Changed", order=None))

        self.assertEqual(self.repo.get_by_id(filter_id).title, "Work")

    def test_delete_removes_row(self):
        """After delete, get_by_id returns None."""
        filter_id = self.repo.insert(self._work_filter())

        self.repo.delete(filter_id)

        self.assertIsNone(self.repo.get_by_id(filter_id))
        self.assertFalse(self.repo.exists(filter_id))

    def test_delete_missing_row_is_noop(self):
        """Deleting an unknown id raises nothing and keeps other rows."""
        home = self.repo.insert(Filter(title="Home"))
        work = self.repo.insert(Filter(title="Work"))

        self.repo.delete(12345)

        self.assertEqual(self.repo.count(), 2)
        self.assertTrue(self.repo.exists(home))
        self.assertTrue(self.repo.exists(work))

    def test_get_by_id_missing(self):
        """Unknown ids return None."""
        self.assertIsNone(self.repo.get_by_id(1))

    def test_get_by_name_ignores_case(self):
        """Title lookups are case-insensitive."""
        filter_id = self.repo.insert(self._work_filter())

        for title in ("work", "WORK", "Work", "wOrK"):
            found = self.repo.get_by_name(title)
            self.assertIsNotNone(found, title)
            self.assertEqual(found.id, filter_id)

    def test_get_by_name_missing(self):
        """No match returns None."""
        self.repo.insert(Filter(title="Work"))
        self.assertIsNone(self.repo.get_by_name("Home"))
        self.assertIsNone(self.repo.get_by_name("Wor"))

    def test_get_by_name_with_duplicate_titles_returns_one(self):
        """Titles are not unique; the lookup returns a single match."""
        first = self.repo.insert(Filter(title="Home"))
        second = self.repo.insert(Filter(title="home"))

        found = self.repo.get_by_name("HOME")

        self.assertIsInstance(found, Filter)
        self.assertIn(found.id, {first, second})
        self.assertEqual(self.repo.count(), 2)

    def test_get_all_returns_every_row(self):
        """get_all returns all stored filters."""
        ids = [self.repo.insert(Filter(title=title)) for title in ("Today", "Work", "Home")]

        filters = self.repo.get_all()

        self.assertEqual(sorted(f.id for f in filters), sorted(ids))
        self.assertEqual({f.title for f in filters}, {"Today", "Work", "Home"})

    def test_get_all_empty(self):
        """An empty table gives an empty list."""
        self.assertEqual(self.repo.get_all(), [])

    def test_get_filters_matches_get_all(self):
        """get_filters is an alias of get_all."""
        self.repo.insert(Filter(title="Today"))
        self.repo.insert(self._work_filter())

        self.assertEqual(self.repo.get_filters(), self.repo.get_all())

    def test_exists_and_count(self):
        """Helpers report stored rows."""
        self.assertEqual(self.repo.count(), 0)
        filter_id = self.repo.insert(Filter(title="Today"))
        self.assertTrue(self.repo.exists(filter_id))
        self.assertFalse(self.repo.exists(filter_id + 1))
        self.assertEqual(self.repo.count(), 1)

    def test_get_all_frame(self):
        """The DataFrame view uses Filter attribute names."""
        filter_id = self.repo.insert(self._work_filter())

        frame = self.repo.get_all_frame()

        self.assertEqual(list(frame.columns), list(Filter().to_dict().keys()))
        self.assertEqual(len(frame), 1)
        self.assertEqual(frame.iloc[0]['id'], filter_id)
        self.assertEqual(frame.iloc[0]['title'], "Work")

    def test_get_all_frame_empty(self):
        """An empty table gives an empty frame."""
        self.assertTrue(self.repo.get_all_frame().empty)

    def test_out_of_range_ids_match_nothing(self):
        """Ids beyond a 64-bit integer cannot be stored, so they are absent."""
        filter_id = self.repo.insert(self._work_filter())

        for missing in (2 ** 64, 2 ** 63, -2 ** 63 - 1):
            with self.subTest(id=missing):
                self.assertIsNone(self.repo.get_by_id(missing))
                self.assertFalse(self.repo.exists(missing))
                self.repo.delete(missing)
                self.repo.update(Filter(id=missing, title="Ghost"))

        self.assertEqual(self.repo.get_all(), [self._work_filter().with_id(filter_id)])

    def test_largest_id_is_usable(self):
        largest = 2 ** 63 - 1
        self.assertEqual(self.repo.insert(Filter(id=largest, title="Last")), largest)
        self.assertEqual(self.repo.get_by_id(largest).title, "Last")

    def test_insert_out_of_range_id_is_caller_error(self):
        with self.assertRaises(OverflowError):
            self.repo.insert(Filter(id=2 ** 64, title="Too big"))
        self.assertEqual(self.repo.count(), 0)

    def test_unbindable_value_propagates_unchanged(self):
        """Programming errors are not reported as the engine being unavailable."""
        with self.assertRaises((sqlite3.ProgrammingError, sqlite3.InterfaceError)):
            self.repo.insert(Filter(title=["x"]))
        self.assertEqual(self.repo.count(), 0)

    def test_insert_logs_at_info(self):
        with self.assertLogs('task_filters.repositories.filter_repository', level='INFO') as logs:
            filter_id = self.repo.insert(Filter(title="Work"))

        self.assertTrue(any(f"Inserted filter {filter_id}" in line for line in logs.output))

    def test_constraint_violation_logs_at_error(self):
        self.repo.insert(Filter(id=3, title="First"))

        with self.assertLogs('task_filters.database', level='ERROR') as logs:
            with self.assertRaises(StorageConstraintError):
                self.repo.insert(Filter(id=3, title="Second"))

        self.assertTrue(any("Constraint violation during insert" in line for line in logs.output))

    def test_missing_table_raises_unavailable(self):
        """Engine failures other than constraints surface as StorageUnavailableError."""
        conn = sqlite3.connect(self.db_path)
        conn.execute("DROP TABLE filters")
        conn.commit()
        conn.close()

        with self.assertRaises(StorageUnavailableError) as context:
            self.repo.get_all()

        self.assertIsInstance(context.exception.__cause__, sqlite3.OperationalError)


if __name__ == '__main__':
    unittest.main()
