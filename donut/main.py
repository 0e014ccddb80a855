from fastapi import FastAPI, Request, BackgroundTasks, HTTPException, Response
from fastapi.responses import PlainTextResponse
from donut.errors import InvalidPayloadError
from donut.slack_events import handler
from donut.utils_slack.validators import parse_interaction_payload
from donut import logger

app = FastAPI()


@app.post("/interactions")
async def slack_interactions(req: Request, background_tasks: BackgroundTasks):
    # Slack sends interactivity as a form with a single JSON `payload` field
    form = await req.form()
    try:
        payload = parse_interaction_payload(form.get("payload"))
    except InvalidPayloadError as e:
        logger.warning("Rejected interaction: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    # empty 200 acks within Slack's 3s window and closes submitted modals
    background_tasks.add_task(handler, payload)
    return Response(status_code=200)


# Use this to verify that the server is running and handling requests.
@app.get("/", response_class=PlainTextResponse)
def root():
    return "Hello, tofu!"
