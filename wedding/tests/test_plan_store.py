import threading
import unittest
from datetime import date
from wedding.domain.errors import CategoryNotFound, InvalidInput, NotFound
from wedding.events.Event_Bus import EventBus, PLAN_CHANGED, BUDGET_OVER_ALLOCATED, PLAN_REPLACED
from wedding.infra.KeyValue_Store import InMemoryKeyValueStore
from wedding.infra.Plan_Repository import PlanRepository
from wedding.logic.planning.plan_store import WeddingPlanStore


class TestWeddingPlanStore(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.events = []
        for name in (PLAN_CHANGED, PLAN_REPLACED, BUDGET_OVER_ALLOCATED):
            self.bus.subscribe(name, lambda event, payload: self.events.append((event, payload)))
        self.storage = InMemoryKeyValueStore()
        self.store = WeddingPlanStore(
            repository=PlanRepository(self.storage, key="test-plan", event_bus=self.bus),
            event_bus=self.bus,
        )

    def test_guest_scenario(self):
        empty = self.store.completion_percentage()
        self.store.add_guest(name="Priya", email="p@x.com", rsvp_status="Pending")
        self.assertEqual(self.store.plan.guests.count_by_rsvp_status("Pending"), 1)
        self.assertEqual(self.store.completion_percentage() - empty, 13)

    def test_royal_scenario(self):
        self.store.select_template("royal")
        self.assertEqual(self.store.plan.budget.total_budget, 2500000)
        self.assertEqual(self.store.plan.basic_info.guest_count, 500)
        self.assertEqual(self.events[-1][0], PLAN_REPLACED)

    def test_allocation_scenario(self):
        self.store.set_category_amount("Venue", 50000)
        self.store.set_category_amount("Catering", 30000)
        self.assertEqual(self.store.plan.budget.total_allocated(), 80000)

    def test_mutations_set_dirty_flag_and_save_clears_it(self):
        self.assertFalse(self.store.has_unsaved_changes)
        self.store.update_basic_info(bride_name="Priya")
        self.assertTrue(self.store.has_unsaved_changes)
        self.store.save()
        self.assertFalse(self.store.has_unsaved_changes)
        task_id = self.store.add_task(task="Book venue")
        self.store.save()
        self.store.toggle_task(task_id)
        self.assertTrue(self.store.has_unsaved_changes)

    def test_failed_mutation_keeps_plan_and_flag(self):
        guest_id = self.store.add_guest(name="Priya")
        self.store.save()
        before = self.store.snapshot()
        with self.assertRaises(NotFound):
            self.store.remove_guest("missing")
        with self.assertRaises(InvalidInput):
            self.store.update_guest(guest_id, rsvp_status="Perhaps")
        with self.assertRaises(InvalidInput):
            self.store.update_basic_info(guest_count="lots", bride_name="Asha")
        with self.assertRaises(CategoryNotFound):
            self.store.set_category_amount("Fireworks", 10)
        self.assertFalse(self.store.has_unsaved_changes)
        self.assertEqual(self.store.plan, before)

    def test_snapshot_is_independent(self):
        snapshot = self.store.snapshot()
        self.store.add_vendor(name="Capture Moments", cost=75000)
        self.assertEqual(len(snapshot.vendors), 0)
        self.assertEqual(len(self.store.plan.vendors), 1)

    def test_changes_publish_completion(self):
        self.store.update_basic_info(groom_name="Rahul")
        event, payload = self.events[-1]
        self.assertEqual(event, PLAN_CHANGED)
        self.assertEqual(payload, {"action": "basic_info.update", "completion": 13})

    def test_over_allocation_publishes_warning_event(self):
        self.store.set_total_budget(1000)
        self.store.set_category_amount("Venue", 2000)
        names = [e for e, _ in self.events]
        self.assertIn(BUDGET_OVER_ALLOCATED, names)
        self.assertEqual(self.store.plan.budget.category("Venue").amount, 2000)

    def test_load_saved_restores_plan(self):
        self.store.select_template("garden")
        self.store.add_guest(name="Priya")
        self.store.save()
        fresh = WeddingPlanStore(repository=PlanRepository(self.storage, key="test-plan"), event_bus=self.bus)
        self.assertTrue(fresh.load_saved())
        self.assertEqual(fresh.plan, self.store.plan)
        self.assertFalse(fresh.has_unsaved_changes)

    def test_load_saved_without_record_keeps_current_plan(self):
        self.store.update_basic_info(venue="Lake View")
        self.assertFalse(self.store.load_saved())
        self.assertEqual(self.store.plan.basic_info.venue, "Lake View")

    def test_export_does_not_touch_state(self):
        self.store.update_basic_info(bride_name="Priya")
        data = self.store.export()
        self.assertTrue(self.store.has_unsaved_changes)
        self.assertIsNone(self.storage.get("test-plan"))
        self.assertIn(b'"brideName": "Priya"', data)

    def test_import_replaces_plan(self):
        self.store.update_basic_info(bride_name="Priya")
        exported = self.store.export()
        self.store.start_from_scratch()
        self.store.import_plan(exported)
        self.assertEqual(self.store.plan.basic_info.bride_name, "Priya")
        self.assertTrue(self.store.has_unsaved_changes)

    def test_checklist_tasks_follow_wedding_date(self):
        self.store.update_basic_info(wedding_date="2026-12-12")
        self.store.save()
        ids = self.store.add_checklist_tasks()
        self.assertTrue(self.store.has_unsaved_changes)
        self.assertEqual(len(self.store.plan.timeline), len(ids))
        first = self.store.plan.timeline.get(ids[0])
        self.assertEqual(first.due_date, date(2025, 12, 12))
        self.assertEqual(self.events[-1], (PLAN_CHANGED, {"action": "task.checklist",
                                                         "completion": self.store.completion_percentage()}))

    def test_concurrent_mutations_are_not_lost(self):
        def add_guests():
            for i in range(50):
                self.store.add_guest(name=f"Guest {i}")

        workers = [threading.Thread(target=add_guests) for _ in range(4)]
        for w in workers:
            w.start()
        for w in workers:
            w.join()
        self.assertEqual(len(self.store.plan.guests), 200)
        self.assertEqual(len(set(self.store.plan.guests.ids())), 200)

    def test_lock_is_reentrant_for_grouped_calls(self):
        with self.store.lock:
            self.store.set_category_amount("Venue", 100)
            self.store.set_category_spent("Venue", 50)
        self.assertEqual(self.store.plan.budget.category("Venue").spent, 50)
