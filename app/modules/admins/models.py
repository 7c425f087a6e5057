# Supabase table: admins
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

admins:
- id: uuid (primary key, = auth.users.id)
- email: text (not null)
- name: text (nullable)
- role: text (nullable) - values: super_admin, admin, editor (missing role is treated as admin)
- must_change_password: boolean (default: false)
- password_changed_at: timestamp (nullable)
- created_at: timestamp (default: now())
"""
