# Third-party imports
from fastapi import APIRouter

# Local application imports
from civicconnect.api.internal.routes.v1.auth import auth_router
from civicconnect.api.internal.routes.v1.issues import issue_router

router = APIRouter()

# Include all internal v1 routers
router.include_router(auth_router)
router.include_router(issue_router)
