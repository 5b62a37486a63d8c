"""
Custom guards, scoped registrations, hooks and debug traces.

Demonstrates:
- Function guards with the @guard decorator
- Restricting a guard to some routes with only=
- Logging every rejection with an AfterPipeline hook
- Inspecting ctx.state["trace"] on a debug chain
"""

import logging

from fastapi import Depends, FastAPI

from fastapi_route_guards import (
    CONTINUE,
    AfterPipeline,
    GuardChain,
    Reject,
    Rejected,
    RequestContext,
    RequireAuthenticatedUser,
    guard,
    guard_dependency,
    header_user_id,
    install_rejection_handler,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("audit")

app = FastAPI(title="Custom Guards")
install_rejection_handler(app)

ADMINS = {"alice"}


@guard("require_admin", responses={"403": {"description": "Admins only"}})
async def require_admin(ctx: RequestContext):
    if ctx.user_id in ADMINS:
        return CONTINUE
    return Reject("Admins only", status_code=403)


async def audit(ctx: RequestContext, outcome):
    if isinstance(outcome, Rejected):
        logger.warning("%s denied on %s by %s", ctx.user_id, ctx.route, outcome.guard)


chain = (
    GuardChain(RequireAuthenticatedUser(), debug=True)
    .add(require_admin, only=["admin#dashboard"])
    .add_hook(AfterPipeline(audit))
)

# Upstream gateway sets X-User-Id after verifying credentials
identity = header_user_id("X-User-Id")


@app.get("/profile")
async def profile(
    ctx: RequestContext = Depends(guard_dependency(chain, "users#profile", identity=identity)),
):
    trace = ctx.state["trace"]
    return {
        "user_id": ctx.user_id,
        "guards": [entry.guard_name for entry in trace.entries],
    }


@app.get("/admin")
async def dashboard(
    ctx: RequestContext = Depends(guard_dependency(chain, "admin#dashboard", identity=identity)),
):
    return {"welcome": ctx.user_id}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl -H "X-User-Id: bob" http://localhost:8000/profile
    # curl -H "X-User-Id: bob" http://localhost:8000/admin    -> 403
    # curl -H "X-User-Id: alice" http://localhost:8000/admin
