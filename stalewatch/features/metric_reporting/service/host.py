import socket
from typing import Optional

from stalewatch.core.config.settings import settings
from ..domain.models import HostIdentity

def resolve_host_identity(instance_id: Optional[str] = None,
                          instance_name: Optional[str] = None) -> HostIdentity:
    """
    Explicit arguments win, then settings, then the local hostname.
    """
    hostname = socket.gethostname()
    return HostIdentity(
        instance_id=instance_id or settings.INSTANCE_ID or hostname,
        instance_name=instance_name or settings.INSTANCE_NAME or hostname
    )
