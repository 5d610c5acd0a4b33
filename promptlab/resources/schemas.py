from pydantic import BaseModel, ConfigDict


class Resource(BaseModel):
    """Downloadable course material."""

    model_config = ConfigDict(frozen=True)

    title: str
    type: str
    size: str
    filename: str
    placeholder: str

    @property
    def download_url(self) -> str:
        return f"/api/resources/{self.filename}"


class ResourceResponse(BaseModel):
    """Resource metadata as exposed to the frontend."""

    title: str
    type: str
    size: str
    filename: str
    download_url: str

    @classmethod
    def from_resource(cls, resource: Resource) -> "ResourceResponse":
        return cls(
            title=resource.title,
            type=resource.type,
            size=resource.size,
            filename=resource.filename,
            download_url=resource.download_url,
        )
