"""
Verify the school table: row counts and sample coordinates
"""
import psycopg2

from schoolfinder.config import Config

conn = psycopg2.connect(**Config.db_config())
cursor = conn.cursor()

print("=" * 70)
print("VERIFICATION REPORT")
print("=" * 70)

print("\n1. school table:")
cursor.execute("SELECT COUNT(*) FROM school")
total_count = cursor.fetchone()[0]
print(f"   Total schools: {total_count}")

cursor.execute("SELECT COUNT(*) FROM school WHERE latitude IS NOT NULL AND longitude IS NOT NULL")
with_coords = cursor.fetchone()[0]
print(f"   Schools with coordinates: {with_coords}")

if with_coords != total_count:
    print(f"   ✗ {total_count - with_coords} schools are missing coordinates")

print("\n   Sample records:")
cursor.execute("""
    SELECT id, name, address, latitude, longitude
    FROM school
    LIMIT 5
""")
for row in cursor.fetchall():
    print(f"   - ID: {row[0]}, {row[1]}, {row[2]} - ({row[3]}, {row[4]})")

print("\n" + "=" * 70)

cursor.close()
conn.close()
