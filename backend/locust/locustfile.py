"""
Locust Load Test Suite

Run scenarios:
  locust -f locustfile.py --tags contention   # Many users, few slots
  locust -f locustfile.py --tags read         # List endpoints
  locust -f locustfile.py --tags edge         # Bad input
  locust -f locustfile.py                     # All tests

Targets a server started with the seeded layout (seat ids s-pc1.., s-c1..).
"""

import random
import string
from locust import HttpUser, task, between, tag, events

# Slots everyone fights over in the contention test
HOT_SEATS = ["s-pc1", "s-pc2", "s-pc3"]
HOT_DATE = "2030-01-15"
HOT_START_TIMES = ["09:00", "10:00"]

SEAT_IDS = []


def random_user_id():
    return "load-" + "".join(random.choices(string.ascii_lowercase + string.digits, k=10))


def end_of(start_time: str) -> str:
    hour = int(start_time.split(":")[0]) + 1
    return f"{hour:02d}:00"


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    print("\n" + "=" * 60)
    print(f"CONTENTION SLOTS: {len(HOT_SEATS) * len(HOT_START_TIMES)} on {HOT_DATE}")
    print("=" * 60)


class ContentionUser(HttpUser):
    """
    TEST 1: Contention - 100 users -> 6 slots

    Run: locust -f locustfile.py --tags contention -u 100 -r 50 --run-time 30s

    After test, verify no slot has two ACTIVE bookings:
      SELECT seat_id, date, start_time, COUNT(*) FROM bookings
      WHERE status = 'ACTIVE' GROUP BY 1, 2, 3 HAVING COUNT(*) > 1;
    Should return no rows.
    """
    wait_time = between(0, 0.1)

    def on_start(self):
        self.user_id = random_user_id()
        self.client.post("/api/users", json={
            "id": self.user_id,
            "name": f"Load {self.user_id}",
            "email": f"{self.user_id}@student.edu",
            "password": "pass",
            "role": "STUDENT",
        })

    @tag("contention")
    @task
    def book_hot_slot(self):
        start = random.choice(HOT_START_TIMES)
        with self.client.post("/api/bookings",
            json={
                "seatId": random.choice(HOT_SEATS),
                "userId": self.user_id,
                "userName": f"Load {self.user_id}",
                "date": HOT_DATE,
                "startTime": start,
                "endTime": end_of(start),
            },
            name="/api/bookings [hot slot]",
            catch_response=True
        ) as resp:
            if resp.status_code in (201, 409):
                resp.success()  # 409 expected once the slot is taken
            else:
                resp.failure(f"Unexpected: {resp.status_code}")


class ReadUser(HttpUser):
    """
    TEST 2: Read throughput on the list endpoints the seat map polls.

    Run: locust -f locustfile.py --tags read -u 100 -r 20 --run-time 60s
    """
    wait_time = between(0.1, 0.5)

    @tag("read")
    @task(10)
    def list_seats(self):
        resp = self.client.get("/api/seats")
        if resp.status_code == 200 and not SEAT_IDS:
            SEAT_IDS.extend(seat["id"] for seat in resp.json())

    @tag("read")
    @task(10)
    def list_bookings(self):
        self.client.get("/api/bookings")

    @tag("read")
    @task(1)
    def health_check(self):
        self.client.get("/health")


class EdgeCaseUser(HttpUser):
    """
    TEST 3: Edge cases - Bad input handling

    Run: locust -f locustfile.py --tags edge -u 20 -r 5 --run-time 30s

    System should NOT crash, return proper error codes.
    """
    wait_time = between(0.5, 1.5)

    def _expect(self, resp, codes):
        if resp.status_code in codes:
            resp.success()
        else:
            resp.failure(f"Expected {codes}, got {resp.status_code}")

    @tag("edge")
    @task
    def booking_missing_fields(self):
        with self.client.post("/api/bookings",
            json={"seatId": "s-c1"},
            catch_response=True
        ) as resp:
            self._expect(resp, [422])

    @tag("edge")
    @task
    def malformed_json(self):
        with self.client.post("/api/bookings",
            data="not json at all",
            catch_response=True
        ) as resp:
            self._expect(resp, [400, 422])

    @tag("edge")
    @task
    def toggle_unknown_seat(self):
        with self.client.post("/api/seats/toggle-maintenance/no-such-seat",
            name="/api/seats/toggle-maintenance/{id}",
            catch_response=True
        ) as resp:
            self._expect(resp, [404])

    @tag("edge")
    @task
    def cancel_unknown_booking(self):
        with self.client.put("/api/bookings/no-such-booking/cancel",
            name="/api/bookings/{id}/cancel",
            catch_response=True
        ) as resp:
            self._expect(resp, [404])
