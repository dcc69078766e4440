from fastapi import FastAPI, Request, Response
from starlette.status import HTTP_204_NO_CONTENT

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,x-api-key",
    "Access-Control-Allow-Methods": "POST,OPTIONS,GET",
}


def install_cors(app: FastAPI) -> None:
    """
    En-têtes CORS fixes sur toutes les réponses (erreurs comprises).
    Les preflight OPTIONS répondent 204 avant toute autre vérification.
    """

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=HTTP_204_NO_CONTENT, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
