import hashlib


def mask_phone(phone: str | None) -> str | None:
    if not phone:
        return phone
    # suffix + hash
    suffix = phone[-4:]
    digest = hashlib.sha256(phone.encode("utf-8")).hexdigest()[:8]
    return f"...{suffix}#{digest}"

def mask_sid(sid: str | None) -> str | None:
    if not sid:
        return sid

    if len(sid) <= 6:
        return sid  # too short to mask meaningfully

    prefix = sid[:2]
    suffix = sid[-4:]
    return f"{prefix}...{suffix}"
