"""Travel extra selection (Value Object)"""

import attrs


def _non_negative(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise ValueError('Extra quantity cannot be negative')


@attrs.define(frozen=True)
class ExtraSelection:
    """Quantity 0 means the extra is removed from the session"""

    extra_id: str
    quantity: int = attrs.field(default=1, validator=_non_negative)
