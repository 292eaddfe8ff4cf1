# file: src/module4_container/metadata.py
"""
Metadata record carried inside every container.
"""

import json
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from src.module1_checksum import crc32_checksum

from .container_errors import ContainerEncodingError, MalformedContainerError


_CHECKSUM_PATTERN = re.compile(r"^[0-9a-f]{8}$")


@dataclass(frozen=True)
class ContainerMetadata:
    """Timestamp, optional filename and CRC-32 of the payload"""
    timestamp: str  # ISO-8601, UTC
    checksum: str  # 8 lowercase hex digits
    filename: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        """Key order matches the serialized form: timestamp, filename, checksum."""
        record = {'timestamp': self.timestamp}
        if self.filename is not None:
            record['filename'] = self.filename
        record['checksum'] = self.checksum
        return record
    
    def to_json_bytes(self) -> bytes:
        """Compact UTF-8 JSON encoding used inside the container."""
        try:
            text = json.dumps(self.to_dict(), ensure_ascii=False, separators=(',', ':'))
            return text.encode('utf-8')
        except (TypeError, ValueError, UnicodeEncodeError) as e:
            raise ContainerEncodingError(f"Metadata is not serializable: {e}") from e
    
    @classmethod
    def from_dict(cls, record: Any) -> "ContainerMetadata":
        """
        Validate and build metadata from a decoded JSON object.
        
        Raises:
            MalformedContainerError: If the record does not have the expected shape
        """
        if not isinstance(record, dict):
            raise MalformedContainerError(
                f"Metadata must be a JSON object, got {type(record).__name__}"
            )
        
        timestamp = record.get('timestamp')
        checksum = record.get('checksum')
        filename = record.get('filename')
        
        if not isinstance(timestamp, str):
            raise MalformedContainerError("Metadata field 'timestamp' missing or not a string")
        if not isinstance(checksum, str) or not _CHECKSUM_PATTERN.match(checksum):
            raise MalformedContainerError(
                f"Metadata field 'checksum' must be 8 lowercase hex digits, got {checksum!r}"
            )
        if filename is not None and not isinstance(filename, str):
            raise MalformedContainerError("Metadata field 'filename' must be a string")
        
        return cls(timestamp=timestamp, checksum=checksum, filename=filename)
    
    @classmethod
    def from_json_bytes(cls, data: bytes) -> "ContainerMetadata":
        """
        Parse the container's metadata bytes.
        
        Raises:
            MalformedContainerError: If bytes are not UTF-8 JSON of the expected shape
        """
        # ValueError covers JSONDecodeError and over-long integer literals
        try:
            record = json.loads(data.decode('utf-8'))
        except (UnicodeDecodeError, ValueError, RecursionError) as e:
            raise MalformedContainerError(f"Metadata could not be parsed: {e}") from e
        
        return cls.from_dict(record)


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """
    Render a moment as ISO-8601 UTC with millisecond precision.
    
    Example:
        >>> utc_timestamp(datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
        '2024-01-02T03:04:05.000Z'
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def create_metadata(
    payload: bytes,
    filename: Optional[str] = None,
    timestamp: Optional[datetime] = None
) -> ContainerMetadata:
    """
    Build the metadata record for a payload.
    
    Args:
        payload: Raw bytes being stored
        filename: Optional original file name
        timestamp: Creation time (default: now)
    
    Returns:
        ContainerMetadata with the payload's CRC-32
    """
    return ContainerMetadata(
        timestamp=utc_timestamp(timestamp),
        checksum=crc32_checksum(payload),
        filename=filename,
    )
