# api.py

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from salario.config import settings
from salario.folha.router import router as salario_router

app = FastAPI(title=settings.APP_NAME, version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(salario_router)


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}
