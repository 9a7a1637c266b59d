"""
Use Cases

Organized by area:
- auth/: Login, tokens, profile and password
- users/: Administrator accounts
- content/: Generic CRUD, publishing and counters for every content resource
- settings/: Site-wide settings
- contact/: Public contact form
- upload/: File uploads to object storage
- assistant/: Site assistant chat
- dashboard/: Admin dashboard statistics
- audit/: Audit trail queries
"""
