from pydantic import BaseModel

class ToggleLike(BaseModel):
    """Like state the client rendered when the button was pressed"""
    is_liked: bool

class ToggleSave(BaseModel):
    is_saved: bool

class ToggleResult(BaseModel):
    status: str = "ok"
