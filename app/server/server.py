from fastapi import FastAPI

from api.router import api_router
from api.dependencies.rate_limits import setup_rate_limiter
from server.lifespan import lifespan


handler = FastAPI(title="Doxy.me Slack Calling", lifespan=lifespan)
setup_rate_limiter(handler)

handler.include_router(api_router)
