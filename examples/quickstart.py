"""
texpacker Quick Start Example

This example shows the basic usage of texpacker to build sprite atlases.
"""

from texpacker import Packer

# 512x512 atlases with a 2 pixel gap between sprites
packer = Packer(atlas_size=512, padding=2)

print("Packing sprites/ ...")
result = packer.pack_files(["sprites/"])

for error in result.rejected:
    print(f"⚠️  {error}")

files = result.save("output/sprites.png", manifest=True)
for path in files:
    print(f"✅ Saved {path}")

print(f"\nDone! {result.placed_count} sprites in {len(result.atlases)} atlas(es).")
