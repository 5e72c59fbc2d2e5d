# tests/fakes.py

"""In-memory stand-ins for the Supabase storage client"""


class FakeBucket:
    def __init__(self, name, fail_signing=False):
        self.name = name
        self.fail_signing = fail_signing
        self.objects = {}
        self.uploads = []

    def upload(self, path, file, file_options=None):
        self.uploads.append((path, file_options))
        if path in self.objects and (file_options or {}).get("upsert") != "true":
            raise RuntimeError("The resource already exists")
        self.objects[path] = bytes(file)
        return {"Key": f"{self.name}/{path}"}

    def create_signed_url(self, path, expires_in):
        if self.fail_signing:
            raise RuntimeError("signing service unavailable")
        if path not in self.objects:
            raise RuntimeError("Object not found")
        return {
            "signedURL": (
                f"https://proj.supabase.co/storage/v1/object/sign/{self.name}/{path}"
                f"?token=signed-{expires_in}"
            )
        }


class FakeStorage:
    def __init__(self, fail_signing=False):
        self.buckets = {}
        self.fail_signing = fail_signing

    def from_(self, name):
        if name not in self.buckets:
            self.buckets[name] = FakeBucket(name, fail_signing=self.fail_signing)
        return self.buckets[name]


class FakeSupabaseClient:
    def __init__(self, fail_signing=False):
        self.storage = FakeStorage(fail_signing=fail_signing)
