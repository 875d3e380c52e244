from fastapi.middleware.cors import CORSMiddleware

from inventory_app.config import Settings


def configure_cors(app, settings: Settings):
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        # the session cookie has to travel with API calls
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        max_age=86400,
    )
