from pydantic import BaseModel, ConfigDict, Field


class XmlPathConfig(BaseModel):
    """Namespace declarations used when resolving ``prefix:name`` segments."""

    model_config = ConfigDict(frozen=True)

    declared_namespaces: dict[str, str] = Field(
        default_factory=dict,
        description="Prefix to namespace URI mapping",
    )

    def declared_namespace(self, prefix: str, uri: str) -> "XmlPathConfig":
        return self.model_copy(
            update={"declared_namespaces": {**self.declared_namespaces, prefix: uri}}
        )
