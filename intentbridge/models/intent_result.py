# Role: Outcome of one intent-detection call. "user" echoes the text Dialogflow understood,
# "bot" is the fulfillment text of the matched intent.

from pydantic import BaseModel


class IntentResult(BaseModel):
    user: str
    bot: str
