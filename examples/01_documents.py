"""
Documents API guarded by session authentication.

Demonstrates:
- Registering a guard once for every route
- Skipping it for public routes
- Reading the authenticated user id in an action
"""

from fastapi import Depends, FastAPI, HTTPException, Request
from starlette.middleware.sessions import SessionMiddleware

from fastapi_route_guards import (
    GuardChain,
    RequestContext,
    RequireAuthenticatedUser,
    enrich_openapi,
    guard_dependency,
    install_rejection_handler,
)

app = FastAPI(title="Documents")
app.add_middleware(SessionMiddleware, secret_key="change-me")
install_rejection_handler(app)

# Built once at startup, shared read-only by every request
guards = (
    GuardChain(RequireAuthenticatedUser())
    .skip("require_authenticated_user", only=["documents#index", "sessions#create"])
    .resolve()
)

DOCUMENTS = {1: {"id": 1, "title": "Welcome", "owner": 42}}


@app.post("/sessions")
async def create_session(
    user_id: int,
    request: Request,
    ctx: RequestContext = Depends(guard_dependency(guards, "sessions#create")),
):
    """Sign in. Credential checks belong to a real authentication system."""
    request.session["user_id"] = user_id
    return {"user_id": user_id}


@app.get("/documents")
async def index(ctx: RequestContext = Depends(guard_dependency(guards, "documents#index"))):
    """Public listing."""
    return list(DOCUMENTS.values())


@app.get("/documents/{doc_id}")
async def show(
    doc_id: int,
    ctx: RequestContext = Depends(guard_dependency(guards, "documents#show")),
):
    """Requires a signed-in user."""
    if doc_id not in DOCUMENTS:
        raise HTTPException(status_code=404, detail="Document not found")
    return DOCUMENTS[doc_id]


@app.post("/documents")
async def create(
    title: str,
    ctx: RequestContext = Depends(guard_dependency(guards, "documents#create")),
):
    """Requires a signed-in user; the new document belongs to them."""
    doc_id = max(DOCUMENTS) + 1
    DOCUMENTS[doc_id] = {"id": doc_id, "title": title, "owner": ctx.user_id}
    return DOCUMENTS[doc_id]


enrich_openapi(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl http://localhost:8000/documents
    # curl http://localhost:8000/documents/1              -> 401 {"error": "Not authorized"}
    # curl -c jar -X POST "http://localhost:8000/sessions?user_id=42"
    # curl -b jar http://localhost:8000/documents/1
