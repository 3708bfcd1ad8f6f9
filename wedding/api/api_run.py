from fastapi import (
    FastAPI,
    APIRouter,
    Body,
    Depends,
    Query,
    Request,
    Response,
)
from fastapi.responses import JSONResponse
from typing import Optional
import logging
import threading

from wedding.domain.Template import list_templates
from wedding.domain.WeddingPlan import WeddingPlan
from wedding.domain.errors import DeserializationError, InvalidInput, NotFound
from wedding.events.web_observers import start as start_event_observers, get_events as get_web_events
from wedding.logic.planning.plan_store import WeddingPlanStore
from wedding.utilities.constants import (
    BUDGET_CATEGORIES, EXPORT_FILENAME, EXPORT_MEDIA_TYPE, GUEST_CATEGORIES, PLANNING_CHECKLIST, PRIORITIES,
    RSVP_STATUSES, VENDOR_STATUSES
)
from wedding.utilities.validators import BudgetAmountInput, validate_input

# Logging
logger = logging.getLogger("wedding_app")

# Initialize FastAPI app
app = FastAPI(title="Wedding Planning Tool API")
router = APIRouter(prefix="/api")

_store: Optional[WeddingPlanStore] = None
_store_lock = threading.Lock()


def get_store() -> WeddingPlanStore:
    """Session store, created on first use and seeded from storage when a plan was saved."""
    global _store
    with _store_lock:
        if _store is None:
            store = WeddingPlanStore()
            start_event_observers()
            if store.load_saved():
                logger.info("Restored saved wedding plan")
            _store = store
    return _store


# -------------------- Error mapping --------------------
@app.exception_handler(NotFound)
async def _not_found(request: Request, exc: NotFound):
    return JSONResponse(status_code=404, content={"error": str(exc)})


@app.exception_handler(InvalidInput)
async def _invalid_input(request: Request, exc: InvalidInput):
    return JSONResponse(status_code=422, content={"error": str(exc)})


@app.exception_handler(DeserializationError)
async def _bad_document(request: Request, exc: DeserializationError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


def _snapshot(store: WeddingPlanStore) -> dict:
    with store.lock:
        return {
            "plan": store.plan.to_dict(),
            "hasUnsavedChanges": store.has_unsaved_changes,
            "summary": store.summary(),
        }


def _fields(body) -> dict:
    if not isinstance(body, dict):
        raise InvalidInput("Request body must be a JSON object")
    return body


# -------------------- Catalog --------------------
@router.get("/templates")
def get_templates():
    return {"templates": [t.to_dict() for t in list_templates()]}


@router.get("/options")
def get_options():
    """Fixed choices for the planning forms."""
    return {
        "budgetCategories": list(BUDGET_CATEGORIES),
        "guestCategories": list(GUEST_CATEGORIES),
        "rsvpStatuses": list(RSVP_STATUSES),
        "priorities": list(PRIORITIES),
        "vendorStatuses": list(VENDOR_STATUSES),
    }


@router.get("/checklist")
def get_checklist():
    """Standard planning checklist, grouped by how long before the wedding."""
    return {"checklist": [
        {
            "timeframe": timeframe,
            "daysBefore": days_before,
            "tasks": [{"task": name, "priority": priority} for name, priority in items],
        }
        for timeframe, days_before, items in PLANNING_CHECKLIST
    ]}


# -------------------- Plan selection --------------------
@router.get("/plan")
def get_plan(store: WeddingPlanStore = Depends(get_store)):
    return _snapshot(store)


@router.post("/plan/template/{template_id}")
def select_template(template_id: str, store: WeddingPlanStore = Depends(get_store)):
    store.select_template(template_id)
    return _snapshot(store)


@router.post("/plan/scratch")
def start_from_scratch(store: WeddingPlanStore = Depends(get_store)):
    store.start_from_scratch()
    return _snapshot(store)


@router.put("/plan/basic-info")
def update_basic_info(body: dict = Body(...), store: WeddingPlanStore = Depends(get_store)):
    store.update_basic_info(**_fields(body))
    return _snapshot(store)


# -------------------- Budget --------------------
@router.put("/plan/budget/total")
def set_total_budget(body: dict = Body(...), store: WeddingPlanStore = Depends(get_store)):
    store.set_total_budget(_fields(body).get("totalBudget"))
    return _snapshot(store)


@router.put("/plan/budget/categories/{category:path}")
def set_category(category: str, body: dict = Body(...), store: WeddingPlanStore = Depends(get_store)):
    """Update the allocated amount and/or the spent amount of one category."""
    fields = _fields(body)
    if "amount" not in fields and "spent" not in fields:
        raise InvalidInput("Provide 'amount' and/or 'spent'")
    with store.lock:
        # check everything first so a bad "spent" cannot leave a new "amount" behind
        store.plan.budget.category(category)
        for key in ("amount", "spent"):
            if key in fields:
                validate_input(BudgetAmountInput, {"category": category, "amount": fields[key]})
        if "amount" in fields:
            store.set_category_amount(category, fields["amount"])
        if "spent" in fields:
            store.set_category_spent(category, fields["spent"])
        return _snapshot(store)


@router.post("/plan/budget/suggested")
def apply_suggested_allocation(store: WeddingPlanStore = Depends(get_store)):
    store.apply_suggested_allocation()
    return _snapshot(store)


# -------------------- Guests / timeline / vendors --------------------
@router.post("/plan/guests")
def add_guest(body: dict = Body(...), store: WeddingPlanStore = Depends(get_store)):
    return {"id": store.add_guest(**_fields(body)), **_snapshot(store)}


@router.patch("/plan/guests/{guest_id}")
def update_guest(guest_id: str, body: dict = Body(...), store: WeddingPlanStore = Depends(get_store)):
    store.update_guest(guest_id, **_fields(body))
    return _snapshot(store)


@router.delete("/plan/guests/{guest_id}")
def remove_guest(guest_id: str, store: WeddingPlanStore = Depends(get_store)):
    store.remove_guest(guest_id)
    return _snapshot(store)


@router.post("/plan/timeline")
def add_task(body: dict = Body(...), store: WeddingPlanStore = Depends(get_store)):
    return {"id": store.add_task(**_fields(body)), **_snapshot(store)}


@router.post("/plan/timeline/checklist")
def add_checklist(store: WeddingPlanStore = Depends(get_store)):
    with store.lock:
        return {"ids": store.add_checklist_tasks(), **_snapshot(store)}


@router.patch("/plan/timeline/{task_id}")
def update_task(task_id: str, body: dict = Body(...), store: WeddingPlanStore = Depends(get_store)):
    store.update_task(task_id, **_fields(body))
    return _snapshot(store)


@router.post("/plan/timeline/{task_id}/toggle")
def toggle_task(task_id: str, store: WeddingPlanStore = Depends(get_store)):
    completed = store.toggle_task(task_id)
    return {"completed": completed, **_snapshot(store)}


@router.delete("/plan/timeline/{task_id}")
def remove_task(task_id: str, store: WeddingPlanStore = Depends(get_store)):
    store.remove_task(task_id)
    return _snapshot(store)


@router.post("/plan/vendors")
def add_vendor(body: dict = Body(...), store: WeddingPlanStore = Depends(get_store)):
    return {"id": store.add_vendor(**_fields(body)), **_snapshot(store)}


@router.patch("/plan/vendors/{vendor_id}")
def update_vendor(vendor_id: str, body: dict = Body(...), store: WeddingPlanStore = Depends(get_store)):
    store.update_vendor(vendor_id, **_fields(body))
    return _snapshot(store)


@router.delete("/plan/vendors/{vendor_id}")
def remove_vendor(vendor_id: str, store: WeddingPlanStore = Depends(get_store)):
    store.remove_vendor(vendor_id)
    return _snapshot(store)


# -------------------- Persistence --------------------
@router.post("/plan/save")
def save_plan(store: WeddingPlanStore = Depends(get_store)):
    store.save()
    return {"status": "saved", "hasUnsavedChanges": store.has_unsaved_changes}


@router.post("/plan/import")
def import_plan(body: dict = Body(...), store: WeddingPlanStore = Depends(get_store)):
    store.replace_plan(WeddingPlan.from_dict(_fields(body)), "import")
    return _snapshot(store)


@router.get("/plan/export")
def export_plan(store: WeddingPlanStore = Depends(get_store)):
    return Response(
        content=store.export(),
        media_type=EXPORT_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.get("/plan/export.pdf")
def export_plan_pdf(store: WeddingPlanStore = Depends(get_store)):
    return Response(
        content=store.export_pdf(),
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="wedding-plan.pdf"'},
    )


# -------------------- Notifications --------------------
@router.get("/events")
def get_events(since: Optional[int] = Query(default=None)):
    return get_web_events(since)


app.include_router(router)
