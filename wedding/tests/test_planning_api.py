import json
import threading
import unittest
from unittest import mock
from fastapi.testclient import TestClient
from wedding.api import api_run
from wedding.api.api_run import app, get_store
from wedding.events import web_observers
from wedding.events.Event_Bus import EventBus
from wedding.infra.KeyValue_Store import InMemoryKeyValueStore
from wedding.infra.Plan_Repository import PlanRepository
from wedding.logic.planning.plan_store import WeddingPlanStore


class TestPlanningAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        self.bus = EventBus()
        self.storage = InMemoryKeyValueStore()
        self.store = WeddingPlanStore(
            repository=PlanRepository(self.storage, key="wedding-plan", event_bus=self.bus),
            event_bus=self.bus,
        )
        app.dependency_overrides[get_store] = lambda: self.store
        web_observers.clear()
        web_observers.start(self.bus)

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_templates(self):
        resp = self.client.get('/api/templates')
        self.assertEqual(resp.status_code, 200)
        ids = {t['id'] for t in resp.json()['templates']}
        self.assertIn('royal', ids)

    def test_select_template(self):
        resp = self.client.post('/api/plan/template/royal')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['plan']['budget']['totalBudget'], 2500000)
        self.assertEqual(data['plan']['basicInfo']['guestCount'], 500)
        self.assertTrue(data['hasUnsavedChanges'])

    def test_unknown_template_is_404(self):
        resp = self.client.post('/api/plan/template/nope')
        self.assertEqual(resp.status_code, 404)
        self.assertIn('nope', resp.json()['error'])

    def test_guest_flow(self):
        resp = self.client.post('/api/plan/guests', json={'name': 'Priya', 'email': 'p@x.com', 'rsvpStatus': 'Pending'})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        guest_id = data['id']
        self.assertEqual(data['summary']['guests']['rsvp']['Pending'], 1)
        self.assertEqual(data['summary']['completion'], 13)

        resp = self.client.patch(f'/api/plan/guests/{guest_id}', json={'rsvpStatus': 'Confirmed', 'plusOne': True})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['summary']['guests']['expectedHeadcount'], 2)

        self.assertEqual(self.client.delete(f'/api/plan/guests/{guest_id}').status_code, 200)
        self.assertEqual(self.client.delete(f'/api/plan/guests/{guest_id}').status_code, 404)

    def test_invalid_amount_is_422(self):
        resp = self.client.put('/api/plan/budget/total', json={'totalBudget': 'five lakh'})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(self.store.plan.budget.total_budget, 0)
        self.assertFalse(self.store.has_unsaved_changes)

    def test_category_update(self):
        resp = self.client.put('/api/plan/budget/categories/Music/DJ', json={'amount': 40000, 'spent': 10000})
        self.assertEqual(resp.status_code, 200)
        entry = self.store.plan.budget.category('Music/DJ')
        self.assertEqual((entry.amount, entry.spent), (40000, 10000))

    def test_category_update_is_all_or_nothing(self):
        resp = self.client.put('/api/plan/budget/categories/Venue', json={'amount': 5000, 'spent': -1})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(self.store.plan.budget.category('Venue').amount, 0)
        resp = self.client.put('/api/plan/budget/categories/Fireworks', json={'amount': 5000})
        self.assertEqual(resp.status_code, 404)

    def test_timeline_toggle(self):
        task_id = self.client.post('/api/plan/timeline', json={'task': 'Book venue', 'priority': 'High'}).json()['id']
        resp = self.client.post(f'/api/plan/timeline/{task_id}/toggle')
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()['completed'])
        self.assertEqual(resp.json()['summary']['timeline']['completed'], 1)

    def test_save_and_events(self):
        self.client.put('/api/plan/basic-info', json={'brideName': 'Priya', 'weddingDate': '2026-12-12'})
        resp = self.client.post('/api/plan/save')
        self.assertEqual(resp.status_code, 200)
        self.assertFalse(resp.json()['hasUnsavedChanges'])
        stored = json.loads(self.storage.get('wedding-plan'))
        self.assertEqual(stored['basicInfo']['weddingDate'], '2026-12-12')
        events = self.client.get('/api/events').json()['events']
        self.assertIn('plan.saved', [e['type'] for e in events])

    def test_export_download(self):
        self.client.put('/api/plan/basic-info', json={'venue': 'Royal Palace Gardens'})
        resp = self.client.get('/api/plan/export')
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.headers['content-type'].startswith('application/json'))
        self.assertIn('wedding-plan.json', resp.headers['content-disposition'])
        self.assertEqual(resp.json()['basicInfo']['venue'], 'Royal Palace Gardens')

    def test_import_rejects_bad_document(self):
        resp = self.client.post('/api/plan/import', json={'guests': 'everyone'})
        self.assertEqual(resp.status_code, 400)

    def test_pdf_export(self):
        self.client.post('/api/plan/template/garden')
        resp = self.client.get('/api/plan/export.pdf')
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.content.startswith(b'%PDF'))

    def test_checklist_catalog(self):
        resp = self.client.get('/api/checklist')
        self.assertEqual(resp.status_code, 200)
        groups = resp.json()['checklist']
        self.assertEqual(groups[0]['timeframe'], '12 months before')
        self.assertEqual(groups[-1]['daysBefore'], 7)
        self.assertIn({'task': 'Get marriage license', 'priority': 'High'}, groups[4]['tasks'])

    def test_add_checklist_to_timeline(self):
        self.client.put('/api/plan/basic-info', json={'weddingDate': '2026-12-12'})
        resp = self.client.post('/api/plan/timeline/checklist')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(len(data['ids']), 30)
        self.assertEqual(len(data['plan']['timeline']), 30)
        self.assertEqual(data['plan']['timeline'][-1]['dueDate'], '2026-12-05')
        self.assertTrue(data['hasUnsavedChanges'])


class TestStoreCreation(unittest.TestCase):

    def setUp(self):
        self._saved = api_run._store
        api_run._store = None

    def tearDown(self):
        api_run._store = self._saved

    def test_concurrent_first_requests_share_one_store(self):
        created = []

        def make_store():
            store = WeddingPlanStore(
                repository=PlanRepository(InMemoryKeyValueStore(), key="wedding-plan", event_bus=EventBus()),
                event_bus=EventBus(),
            )
            created.append(store)
            return store

        results = []
        with mock.patch.object(api_run, 'WeddingPlanStore', side_effect=make_store), \
                mock.patch.object(api_run, 'start_event_observers'):
            workers = [threading.Thread(target=lambda: results.append(get_store())) for _ in range(8)]
            for w in workers:
                w.start()
            for w in workers:
                w.join()
        self.assertEqual(len(created), 1)
        self.assertTrue(all(r is created[0] for r in results))

# Removed unittest.main() for pytest compatibility
