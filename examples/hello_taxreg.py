import taxreg
from taxreg import Err

# Attach to a running server (TAXREG_URL or host/port) or start one in-process.
srv = taxreg.run(port=8000, open_browser=False)
print(f"taxreg at {getattr(srv, 'url', None) or srv.base_url}")

for tid, first, last, address in [
    (1, "Ada", "Lovelace", "London"),
    (1, "Grace", "Hopper", "NYC"),
    (2, "Grace", "Hopper", "NYC"),
]:
    result = srv.add_taxpayer(tid, first, last, address)
    if isinstance(result, Err):
        print(f"rejected: {result.message}")

for tp in srv.get_taxpayers():
    print(tp)

print(srv.search_taxpayer(3))
