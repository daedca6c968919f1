from locust import HttpUser, task, between
import csv
import os
import random

# Wallets from CSV (column "wallet"); falls back to a couple of well-known addresses
wallets = []
if os.path.exists("wallets.csv"):
    with open("wallets.csv") as f:
        for row in csv.DictReader(f):
            wallets.append(row["wallet"])
if not wallets:
    wallets = [
        "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045",
        "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    ]


class ReputationUser(HttpUser):
    wait_time = between(1, 2)

    @task(5)
    def onchain_stats(self):
        self.client.get(
            "/api/onchain-stats",
            params={"address": random.choice(wallets)},
            name="/api/onchain-stats",
        )

    @task(1)
    def invalid_address(self):
        with self.client.get(
            "/api/onchain-stats",
            params={"address": "0x1234"},
            name="/api/onchain-stats [invalid]",
            catch_response=True,
        ) as resp:
            if resp.status_code == 400:
                resp.success()
