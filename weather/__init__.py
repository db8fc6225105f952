"""Weather feed access: fetching, XML decoding and station validity"""
