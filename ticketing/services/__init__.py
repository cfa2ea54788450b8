from ticketing.services.eligibility_service import EligibilityService

__all__ = ["EligibilityService"]
