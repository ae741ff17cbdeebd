"""Default deployment constants.

The group is the 1024-bit MODP group with a 160-bit prime order subgroup
from RFC 5114 section 2.1. ``BETA_EXPONENT`` derives the second generator
from the first.
"""

P_HEX = (
    "B10B8F96A080E01DDE92DE5EAE5D54EC52C99FBCFB06A3C69A6A9DCA52D23B61"
    "6073E28675A23D189838EF1E2EE652C013ECB4AEA906112324975C3CD49B83BF"
    "ACCBDD7D90C4BD7098488E9C219A73724EFFD6FAE5644738FAA31A4FF55BCCC0"
    "A151AF5F0DC8B4BD45BF37DF365C1A65E68CFDA76D4DA708DF1FB2BC2E4A4371"
)
Q_HEX = "F518AA8781A8DF278ABA4E7D64B7CB9D49462353"
ALPHA_HEX = (
    "A4D1CBD5C3FD34126765A442EFB99905F8104DD258AC507FD6406CFF14266D31"
    "266FEA1E5C41564B777E690F5504F213160217B4B01B886A5E91547F9E2749F4"
    "D7FBD7D3B9A92EE1909D0D2263F80A76A6A24C087A091F531DBF0A0169B6A28A"
    "D662A4D18E73AFA32D779D5918D08BC8858F4DCEF97C2A24855E6EEB22B3B2E5"
)
BETA_EXPONENT_HEX = "266FEA1E5C41564B777E69"

P = int(P_HEX, 16)
Q = int(Q_HEX, 16)
ALPHA = int(ALPHA_HEX, 16)
BETA = pow(ALPHA, int(BETA_EXPONENT_HEX, 16), P)

# Bytes of entropy behind auth ids and minted session ids.
AUTH_ID_BYTES = 16
SESSION_ID_BYTES = 24

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 41337
DEFAULT_SERVER_URL = f"http://{DEFAULT_HOST}:{DEFAULT_PORT}"
