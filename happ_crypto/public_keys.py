"""
Embedded RSA public keys for the Happ crypto link versions.

Each key is a PEM-encoded SubjectPublicKeyInfo block. v2 ships a 2048-bit key,
v3 and v4 ship 4096-bit keys.

These are placeholder keys generated for this project, not Happ's published
keys: links built with them cannot be decoded by a real Happ client. Point
HAPP_CRYPTO_V2_PUBLIC_KEY_FILE, HAPP_CRYPTO_V3_PUBLIC_KEY_FILE and
HAPP_CRYPTO_V4_PUBLIC_KEY_FILE at the vendor's PEM files for production use.
"""

HAPP_CRYPTO_V2_PUBLIC_KEY = """\
-----BEGIN PUBLIC KEY-----
MIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8AMIIBCgKCAQEAi+g4LRLH6n6+qaYmCzN6
bX/Ey5hpfLPqeT6ub0wg7pdsCAgXBdo7USrotGe79aGq+ZjPVpL1d7yDadULh8mJ
ojiRsSJ1xYrB6wo91Bf1eUSZh1QBo4wMBySI/dLnFY2OXSEaxo3EpJqbwA+Mr/J2
GQ56WOIYxkToDxDEOlbpb/HrR+bCf0bEin0PffbHi1y3+BpWemkXfgem6cmcRaGJ
73e74uaOE3/UOEj08QPRA/imVcEaihad9JDA3xUHomDFO8dGvF4oqe62Wjio64gY
tEe2QWr3opmo2DYfilM4CD5qcbwas5lbfYyhgcsUzglsCVATc6Gfd5bYJra/uo8j
mQIDAQAB
-----END PUBLIC KEY-----
"""

HAPP_CRYPTO_V3_PUBLIC_KEY = """\
-----BEGIN PUBLIC KEY-----
MIICIjANBgkqhkiG9w0BAQEFAAOCAg8AMIICCgKCAgEAyJhY/1zmtWaAxutlGvLN
mCThJhZjp39z4QwjU/lCHxZ1WXRjv5Pst4cIG2CXVFtaVvHOOIcPHy2G8stDBxfb
R7CmQ0sg42vMvODM4zY0H5+DZL/E0Dbj0r/xNFGmVX/1aB8W2xDitAWioC8JpVF3
V54QTdyotlSVwBNHdL9r8hAjPSyEe1uF6mkRJKM2l80zDNIPg7KFnE1Cao7EkskP
HIFeqA6EB+qk1fuQVMCGbmT2q2U69HRqOEJD65Ve/IVm4CVmKI1LJxR/lCM1o7ii
sO26QC5kXtjm1GpwZpncjK9Dfex4fygH6H/t65WHk73Rt/FoSvmKyfaITZ7Ssb6k
HRMscCict5svajaucAwrs1tJUnznSSnlxHhw27Rjbi8XPMXyUQOx39J3XsKgeGz2
mfcdfo2zG0D7WYPbXcexGVlPFj6Myz1yjqBLSXcW3VdSW4xiIldyTRTffY52ZiT0
gsvjXqqH1uP0hiDAsT86BGx0Td8yFNISnVonT5bNpn95v0VG2xaLW00IOGR2itFy
OvwLxP18cu5hutyBmLesDhBC4NDnHFGGPThHjc5re/M/lvD6rBXhs6zW4pEYdImy
05CWSp9P9WVUpOhKX0H4AeilWb2+XzbGvTV3/V/D9Lc717Lf+yP4ULZ40UON6m1o
A/xIrcTnWpjc7AYzzu+0siUCAwEAAQ==
-----END PUBLIC KEY-----
"""

HAPP_CRYPTO_V4_PUBLIC_KEY = """\
-----BEGIN PUBLIC KEY-----
MIICIjANBgkqhkiG9w0BAQEFAAOCAg8AMIICCgKCAgEAnTp88D4xKy/AKEKoKoEY
M1p6OOj6n7xMZ1Yby9X/g/4tIbhDIu5lpny6KQ6eVrp0fphSudEg4w5oKKZIDDLH
B/VI5DOCJBaZoXnuhb5jZaqPYC0Snmf5L4B9zv7eNx5cmyg2a7Ts98hb7YDxVaVq
AXm/19J28ggEackG5xmrM4Q6i0+Xm8nvJMe6UtrHmPmRiTI1S2MpCRKM0a9jpwKd
Uvn5DzXH0acbWivnWoc1tU1r0CTRiEgK96iWFM6IPvRi6yo3Y+ZrTJcgY4of3VWm
+1cUAHV1wdjY4keeLrzeDNbpRZi/wNJO8QbMZfixjNLO5aPd9rDOQLJ3jEen27d2
zbrfrnKeYlLB1XmQLjZuNyT6gt+vdms74XScXr6UwQ9rWfgeSnbPcj5OuwGayV/R
hKiAZt2MLvQhC0vCmu7nSTFIfMCd2/GbDMAhBucHPRrWIYjp70I8oAWbMe1CF7wP
0Lmpe7tJ5agSDVyH6toDSFtIe5KtosxJtDJ1xoZndzrpE0+btGGZWMvkIZ+hvb6I
hbgLIQe4f40WCF4f958zKM52TDZRRP/q5P8WgDxjZnCGO7bOLdZS8YGzUyJ7pikR
O4/xNEg9bn53PjtzlZ/uzPVlgTu7sPNlq+jorkVfqOq5h22FCvFNnMvPquYQYbOe
a/RtU7F9jlD2XtImC22MYWkCAwEAAQ==
-----END PUBLIC KEY-----
"""
