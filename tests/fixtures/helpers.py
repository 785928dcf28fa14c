from config import ApplicationConfig

REDIRECT_URI = "http://localhost:5173/auth/callback"
ADMIN_HEADERS = {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}


def bearer(body: dict) -> dict:
    """Authorization header for a callback or refresh response body"""
    return {"Authorization": f"Bearer {body['accessToken']}"}
