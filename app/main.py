from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.routers import meal_plans, progress, public, workouts

app = FastAPI(title="CyberSculpt Health API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(public.router)
app.include_router(meal_plans.router)
app.include_router(workouts.router)
app.include_router(progress.router)


@app.get("/")
def read_root():
    return {"message": "Welcome to CyberSculpt Health"}
