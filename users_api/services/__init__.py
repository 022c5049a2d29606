"""Services: business rules orchestrating repository calls."""
