"""
config.py — Runtime knobs for awslite, read once from the environment.

Environment variables (with sane defaults):
  LOG_LEVEL               : Python logging level for stderr diagnostics (default: WARNING)
  AWSLITE_COPY_CHUNK_SIZE : Bytes per read while copying streams (default: 65536)
  AWSLITE_STRICT_LOGIN    : "1"/"true"/"yes" makes `ecr get-login` stop at the first
                            bad token instead of printing the good ones (default: off)

AWS settings (AWS_PROFILE, AWS_REGION, AWS_DEFAULT_REGION, credentials) are left
to boto3's own resolution chain.
"""

# ── Stdlib imports ────────────────────────────────────────────────────────────
import os

# ── Config (envs with sensible defaults) ─────────────────────────────────────
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").upper()
COPY_CHUNK_SIZE = int(os.environ.get("AWSLITE_COPY_CHUNK_SIZE", "65536"))  # must be > 0, checked by s3copy.copy
STRICT_LOGIN = os.environ.get("AWSLITE_STRICT_LOGIN", "false").lower() in ("1", "true", "yes")

# Object-storage URI marker
S3_SCHEME = "s3://"

# Stdio sentinel for `s3 cp`
STDIO = "-"
