from awssize import AwsSizeError
from awssize import describe
from awssize import parse
from awssize import ratio

# --- Example 1: Normalizing reserved instances to the smallest size ---
reserved = ["db.r6g.large", "db.r6g.2xlarge", "db.r6g.4xlarge"]
unit = parse("db.r6g.large")
total = sum(ratio(parse(instance_class), unit) for instance_class in reserved)
print(f"{len(reserved)} reservations cover {total} x {unit}")

# --- Example 2: Human readable conversion ---
print(describe("cache.t3.2xlarge", "cache.t3.medium"))

# --- Example 3: Sizes that do not divide evenly ---
try:
    ratio(parse("r5.3xlarge"), parse("r5.2xlarge"))
except AwsSizeError as e:
    print(f"An error occurred: {e}")
