import unittest
from concurrent.futures import ThreadPoolExecutor

from todo_api.config import Settings
from todo_api.db import TodoRecord
from todo_api.dependencies import build_todo_service
from todo_api.service import TodoNotFoundError


class TodoServiceTests(unittest.TestCase):
    def setUp(self):
        self.service = build_todo_service(Settings(_env_file=None))

    def test_get_all_todos_returns_seed_records(self):
        todos = self.service.get_all_todos()
        self.assertEqual([todo.id for todo in todos], [1, 2, 3])
        self.assertEqual(
            todos[1].as_dict(),
            {
                "id": 2,
                "title": "Clean the garage",
                "description": "Sort tools and recycle old boxes",
                "completed": False,
            },
        )

    def test_create_todo_ignores_caller_id(self):
        created = self.service.create_todo(
            TodoRecord(id=2, title="New", description="Fresh", completed=False)
        )
        self.assertEqual(created.id, 4)
        self.assertEqual(self.service.get_todo_by_id(2).title, "Clean the garage")

    def test_update_todo_overwrites_fields_and_keeps_id(self):
        updated = self.service.update_todo(
            2, TodoRecord(title="X", description="Y", completed=True)
        )
        self.assertEqual(updated.id, 2)
        self.assertEqual(updated.title, "X")
        self.assertEqual(updated.description, "Y")
        self.assertTrue(updated.completed)
        self.assertEqual(self.service.get_todo_by_id(2), updated)

    def test_update_missing_todo_raises_not_found(self):
        with self.assertRaises(TodoNotFoundError) as ctx:
            self.service.update_todo(999, TodoRecord(title="X"))
        self.assertEqual(ctx.exception.todo_id, 999)
        self.assertEqual(len(self.service.get_all_todos()), 3)

    def test_delete_twice_does_not_raise(self):
        self.service.delete_todo_by_id(1)
        self.assertIsNone(self.service.get_todo_by_id(1))
        self.service.delete_todo_by_id(1)
        self.assertEqual([todo.id for todo in self.service.get_all_todos()], [2, 3])

    def test_concurrent_mixed_operations_keep_the_store_consistent(self):
        def work(n):
            created = self.service.create_todo(TodoRecord(title=f"t{n}"))
            self.service.update_todo(
                created.id, TodoRecord(title=f"u{n}", description="d", completed=True)
            )
            self.service.update_todo(2, TodoRecord(title=f"w{n}"))
            self.service.delete_todo_by_id(created.id)
            return n

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(work, range(100)))

        self.assertEqual(len(results), 100)
        todos = self.service.get_all_todos()
        self.assertEqual([todo.id for todo in todos], [1, 2, 3])
        self.assertIn(todos[1].title, {f"w{n}" for n in range(100)})

    def test_seeding_can_be_disabled(self):
        service = build_todo_service(Settings(_env_file=None, seed_on_startup=False))
        self.assertEqual(service.get_all_todos(), [])


if __name__ == "__main__":
    unittest.main()
