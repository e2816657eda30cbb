"""Test form builders."""
from app.schemas.person import PersonInsertForm


def person_form(instance_id: int, name: str, **kwargs) -> PersonInsertForm:
    """Minimal insert form for a person."""
    return PersonInsertForm(name=name, public_key="pubkey", instance_id=instance_id, **kwargs)
