import re
from urllib.parse import quote

# characters left as-is in a URL query component
QUERY_SAFE = "!$&'()*+,/:;=?@"


def maps_url(address: str) -> str:
    return f"maps://?daddr={quote(address, safe=QUERY_SAFE)}"


def tel_url(phone: str) -> str:
    return f"tel:{re.sub(r'[^0-9]', '', phone)}"
