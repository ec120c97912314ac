import steamidio

for text in ("76561197983318796", "STEAM_0:0:11526534", "U:1:23053068"):
    id = steamidio.parse_id(text)
    print("------------")
    print("Parsed:", repr(id))
    print("ID64:", id.id64())
    print("ID32:", id.id32())
    print("ID3:", id.id3())
    print("Account:", f"{id:32}")
    print("Lookup:", steamidio.build_profile_lookup_url(id))

# the same account whatever format it was written in
assert steamidio.is_same(steamidio.parse_id("STEAM_0:0:11526534"), steamidio.parse_id("U:1:23053068"))
