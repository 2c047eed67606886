"""Signing intents and response models."""

from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class SigningIntent:
    """Description of a temporary write (PUT) grant for a single object.

    Attributes:
        bucket: Target bucket name
        key: Object key the upload will be stored under
        expires_in_seconds: Validity window of the signed URL
        content_type: MIME type the upload must be sent with
        access_control: Canned ACL applied to the stored object
        content_disposition: Optional Content-Disposition header value
    """

    operation: ClassVar[str] = "put_object"

    bucket: str
    key: str
    expires_in_seconds: int
    content_type: str
    access_control: str
    content_disposition: str | None = None

    def to_params(self) -> dict[str, Any]:
        """Render the S3 ``PutObject`` parameters for this intent."""
        params = {
            "Bucket": self.bucket,
            "Key": self.key,
            "ContentType": self.content_type,
            "ACL": self.access_control,
        }
        if self.content_disposition:
            params["ContentDisposition"] = self.content_disposition
        return params


@dataclass(frozen=True)
class ReadIntent:
    """Description of a temporary read (GET) grant for a single object."""

    operation: ClassVar[str] = "get_object"

    bucket: str
    key: str
    expires_in_seconds: int | None = None

    def to_params(self) -> dict[str, Any]:
        return {"Bucket": self.bucket, "Key": self.key}


class SignResult(BaseModel):
    """Response body of a successful sign request.

    Serialized with camelCase aliases and with unset optional fields
    omitted, e.g.::

        {"filename": "a.txt", "key": "uploads/a.txt", "signedUrl": "https://..."}
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    filename: str
    key: str
    signed_url: str = Field(alias="signedUrl")
    public_url: str | None = Field(default=None, alias="publicUrl")
    headers: dict[str, str] | None = None

    def to_body(self) -> dict[str, Any]:
        """Return the JSON body sent to clients."""
        return self.model_dump(by_alias=True, exclude_none=True)
