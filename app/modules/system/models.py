# Supabase table: system_settings (single row)

"""
Expected Supabase table structure:

system_settings:
- id: bigint (generated always as identity, primary key)
- password_expiration_enabled: boolean (default: false)
- password_expiration_days: integer (default: 90)
- updated_at: timestamp (nullable)
"""
