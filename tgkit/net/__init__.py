"""URL parsing, raw HTTP messages, HTTP clients, webhook servers and long polling."""