# Role: FastAPI dependencies. The Dialogflow client is built once at startup (see main.lifespan)
# and handed to routes by reference.

from fastapi import Request

from intentbridge.nlu.dialogflow_client import DialogflowIntentClient


def get_intent_client(request: Request) -> DialogflowIntentClient:
    return request.app.state.intent_client
