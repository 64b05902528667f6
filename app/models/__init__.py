# Import every model so relationship() string targets resolve and
# Base.metadata is complete before create_all().
from app.models.organization import Organization, OrganizationStatus  # noqa: F401
from app.models.user import User, UserRole, ROLE_HIERARCHY  # noqa: F401
from app.models.assessment_result import AssessmentResult  # noqa: F401
from app.models.ministry_opportunity import MinistryOpportunity, OpportunityStatus  # noqa: F401
