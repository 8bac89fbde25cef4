import argparse
import sys
from typing import List

import pandas as pd
import requests

COLUMNS = ["title", "description", "director", "genre", "rating", "releaseDate"]


def read_movies(path: str) -> List[dict]:
    df = pd.read_csv(path, dtype={"releaseDate": str})
    df = df[[column for column in COLUMNS if column in df.columns]]
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient="records")


def insert_movies(base_url: str, movies: List[dict], dry_run: bool, limit: int, timeout: float) -> int:
    url = base_url.rstrip("/") + "/movies/"
    count = 0
    for payload in movies:
        if limit and count >= limit:
            break
        if dry_run:
            count += 1
            continue
        try:
            r = requests.post(url, json=payload, timeout=timeout)
            if r.status_code in (200, 201):
                count += 1
                continue
            if r.status_code == 400:
                print(f"Rejected movie {payload.get('title')!r}: {r.json().get('detail')}", file=sys.stderr)
                continue
            r.raise_for_status()
        except requests.RequestException as e:
            print(f"Failed to insert movie {payload.get('title')!r}: {e}", file=sys.stderr)
    return count


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--base_url", type=str, default="http://localhost:8000")
    parser.add_argument("--movies_path", type=str, default="data/movies.csv")
    parser.add_argument("--limit", type=int, default=0)
    parser.add_argument("--timeout", type=float, default=10.0)
    parser.add_argument("--dry_run", action="store_true")
    args = parser.parse_args()
    try:
        rows = read_movies(args.movies_path)
    except (OSError, ValueError) as e:
        print(f"Failed to read movies: {e}", file=sys.stderr)
        sys.exit(1)
    inserted = insert_movies(args.base_url, rows, args.dry_run, args.limit, args.timeout)
    print(f"Inserted {inserted} movies")


if __name__ == "__main__":
    main()
