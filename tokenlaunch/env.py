import os
from dotenv import load_dotenv
from tokenlaunch.errors import MissingEnvironmentVariableException

load_dotenv()


def env_var(accessor: str) -> str:
    """
    Attempt to fetch an environment variable and throw
    an error if not found
    """
    var = os.environ.get(accessor)
    if not var:
        raise MissingEnvironmentVariableException(accessor)
    return var


def rpc_url() -> str:
    return env_var("RPC_URL")


ARTIFACTS_PATH = os.environ.get("ARTIFACTS_PATH", "build/artifacts")
