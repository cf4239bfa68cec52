"""Dictionary file check script"""
import os

data_dir = "data"

print("=" * 50)
print("Dictionary files")
print("=" * 50)

for name in ["idf.txt", "stop_words.txt", "dict.txt"]:
    path = os.path.join(data_dir, name)
    if not os.path.exists(path):
        print(f"\n{name}: missing")
        continue

    size_kb = os.path.getsize(path) / 1024
    with open(path, 'r', encoding='utf-8') as f:
        lines = [line.strip() for line in f if line.strip()]
    print(f"\n{name}:")
    print(f"  size: {size_kb:.2f} KB")
    print(f"  entries: {len(lines)}")
    print(f"  sample:")
    for line in lines[:3]:
        print(f"    {line[:80]}")

print("\n" + "=" * 50)
