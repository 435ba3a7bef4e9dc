#
#
#

"""Wire models for the PowerDNS HTTP API and SkyDNS service records.

Every field has a zero value, so absent or ``null`` fields decode to it and
unknown fields are ignored. Encoding always uses the wire (alias) names.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

NameCount = Dict[str, int]


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    @field_validator('*', mode='before')
    @classmethod
    def _null_is_zero(cls, value: Any, info) -> Any:
        if value is None:
            field = cls.model_fields[info.field_name]
            return field.get_default(call_default_factory=True)
        return value

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode='json', by_alias=True)


class ServiceRecord(WireModel):
    """A registered service instance.

    The UUID a service is registered under is a request key only and is not
    part of the record.
    """

    name: str = Field('', alias='Name')
    version: str = Field('', alias='Version')
    environment: str = Field('', alias='Environment')
    region: str = Field('', alias='Region')
    host: str = Field('', alias='Host')
    port: int = Field(0, alias='Port', ge=0, le=0xFFFF)
    ttl: int = Field(0, alias='TTL', ge=0, le=0xFFFFFFFF)


class Callback(WireModel):
    name: str = Field('', alias='Name')
    version: str = Field('', alias='Version')
    environment: str = Field('', alias='Environment')
    region: str = Field('', alias='Region')
    host: str = Field('', alias='Host')
    reply: str = Field('', alias='Reply')
    port: int = Field(0, alias='Port', ge=0, le=0xFFFF)


class ServerResource(WireModel):
    type: str = ''
    id: str = ''
    url: str = ''
    daemon_type: str = ''
    version: str = ''
    config_url: str = ''
    zones_url: str = ''


class ZoneRecord(WireModel):
    name: str = ''
    type: str = ''
    ttl: int = 0
    disabled: bool = False
    content: str = ''


class Zone(WireModel):
    id: str = ''
    name: str = ''
    type: str = ''
    url: str = ''
    kind: str = ''
    serial: int = 0
    notified_serial: int = 0
    masters: List[str] = Field(default_factory=list)
    dnssec: bool = False
    nsec3param: str = ''
    nsec3narrow: bool = False
    presigned: bool = False
    soa_edit: str = ''
    soa_edit_api: str = ''
    account: str = ''
    nameservers: List[str] = Field(default_factory=list)
    servers: List[str] = Field(default_factory=list)
    recursion_desired: bool = False
    records: List[ZoneRecord] = Field(default_factory=list)
    comments: List[str] = Field(default_factory=list)


class ErrorEnvelope(WireModel):
    error: str = ''
