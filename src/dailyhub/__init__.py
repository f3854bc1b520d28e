"""Daily Hub - Notes, Tasks and Calendar in one place."""
