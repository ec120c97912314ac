import sys

import steamidio

# a response saved from steamidio.build_profile_lookup_url(...)
with open(sys.argv[1], "rb") as f:
    profile = steamidio.SteamCoProfile.from_json(f.read())

print("Name:", profile.name)
print("ID:", profile.steam_id.id64())
print("State:", profile.online_state.display_name)
print("VAC banned:", "yes" if profile.vac_banned else "no")
print("Member since:", profile.member_since)
