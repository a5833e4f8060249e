def mask_value(value: str) -> str:
    """Hide most of an email address or phone number before it reaches the logs."""
    if not isinstance(value, str):
        return value
    if "@" in value:  # email
        name, _, domain = value.partition("@")
        return (name[:2] + "***@" + domain) if name else "***@" + domain
    if value.startswith("+") and len(value) > 6:  # phone
        return value[:3] + "***" + value[-2:]
    if len(value) > 12:
        return value[:4] + "..." + value[-4:]
    return "***"
