from ryandata_contact_domain.email.address import EmailAddress, User
from ryandata_contact_domain.email.domain import Domain, DomainExtension

__all__ = ["Domain", "DomainExtension", "EmailAddress", "User"]
