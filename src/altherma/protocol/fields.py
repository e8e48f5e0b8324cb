"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling.
"""

# Envelope tags
REQUEST = "m2m:rqp"
RESPONSE = "m2m:rsp"

# Envelope fields
FROM = "fr"
REQUEST_ID = "rqi"
OPERATION = "op"
TO = "to"
TYPE = "ty"
CONTENT = "pc"
STATUS = "rsc"

# Operation codes
CREATE = 1
RETRIEVE = 2

# Resource type of a content instance, sent with every write
CONTENT_INSTANCE = 4

# Payload containers
CONTENT_CONTAINER = "m2m:cin"
DEVICE_INFO = "m2m:dvi"
DEBUG = "m2m:dbg"

# Content instance fields
VALUE = "con"
FORMAT = "cnf"
TEXT_PLAIN = "text/plain:0"

# Device info fields
MODEL = "mod"

# Path prefixes
ROOT = "/[0]"
HEAT_PUMP = "MNAE"

# Status codes at or above this value signal a rejected request
STATUS_ERROR = 4000
