"""In-memory and on-disk caches for Service Registry files."""