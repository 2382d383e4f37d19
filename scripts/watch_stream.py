"""
scripts/watch_stream.py

Diagnostic client for the NDJSON camera stream. Prints each provider batch
as it arrives and the final total.

    python scripts/watch_stream.py http://localhost:8000 --bbox 38.9,36.9,-121.2,-123.6
"""
import argparse
import json
import sys
import time
import requests

def main():
    parser = argparse.ArgumentParser(description="Watch the /cameras/stream endpoint")
    parser.add_argument("base_url", nargs="?", default="http://localhost:8000")
    parser.add_argument("--bbox", help="north,south,east,west")
    parser.add_argument("--timeout", type=float, default=60.0)
    args = parser.parse_args()

    params = {"bbox": args.bbox} if args.bbox else {}
    start = time.time()

    try:
        with requests.get(f"{args.base_url}/cameras/stream", params=params, stream=True, timeout=args.timeout) as response:
            if not response.ok:
                print(f"Error {response.status_code}: {response.text}")
                return 1

            for line in response.iter_lines(decode_unicode=True):
                if not line:
                    continue
                message = json.loads(line)
                elapsed = time.time() - start
                if message["type"] == "cameras":
                    print(f"[{elapsed:6.2f}s] {message['provider']}: {len(message['cameras'])} cameras")
                elif message["type"] == "done":
                    print(f"[{elapsed:6.2f}s] done, total={message['total']}")
    except requests.RequestException as e:
        print(f"Stream failed: {e}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
