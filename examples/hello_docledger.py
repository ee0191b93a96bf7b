import docledger

CID = "QmTestCID123456789"
METADATA_HASH = "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"
USER = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"


def main() -> None:
    node = docledger.run(port=0, new_server=True)
    admin = node.client()
    user = admin.with_caller(USER)

    info = admin.get_contract_info()
    print("Contract info:", info)

    stored = user.store_document(1, CID, METADATA_HASH)
    print("Stored:", stored)

    print("Document:", user.get_document(1).as_tuple())
    print("User records:", user.get_user_records(USER))
    print("Valid:", user.verify_document(1, METADATA_HASH))

    for ev in admin.get_events()["events"]:
        print("Event:", ev["seq"], ev["name"], ev["args"])


if __name__ == "__main__":
    main()
