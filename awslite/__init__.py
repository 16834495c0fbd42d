"""awslite — `s3 cp` and `ecr get-login` without the full AWS CLI."""

__version__ = "0.1.0"
