# Entry point for Cloud Run: `uvicorn main:app --host 0.0.0.0 --port $PORT`
from donut.main import app
