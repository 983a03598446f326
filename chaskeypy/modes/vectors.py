"""Published Chaskey test vectors.

``MAC_VECTORS[i]`` is the tag, as four 32-bit words, of the message
``bytes(range(i))`` under `TEST_KEY` with 8 rounds.

``CBC_MASTERS[i - 1]`` is the CBC ciphertext of ``PLAINTEXT[:i]`` under
the key ``MAC_VECTORS[i]`` with the all-zero IV and 8 rounds.
"""

TEST_KEY = (0x833D3433, 0x009F389F, 0x2398E64F, 0x417ACF39)

SUBKEY1 = (0x067A6866, 0x013E713F, 0x4731CC9E, 0x82F59E72)

SUBKEY2 = (0x0CF4D04B, 0x027CE27E, 0x8E63993C, 0x05EB3CE4)

PLAINTEXT = b"Plain text message of sufficient length. Plain text message of sufficient length"

MAC_VECTORS = [
    (0x792E8FE5, 0x75CE87AA, 0x2D1450B5, 0x1191970B),
    (0x13A9307B, 0x50E62C89, 0x4577BD88, 0xC0BBDC18),
    (0x55DF8922, 0x2C7FF577, 0x73809EF4, 0x4E5084C0),
    (0x1BDBB264, 0xA07680D8, 0x8E5B2AB8, 0x20660413),
    (0x30B2D171, 0xE38532FB, 0x16707C16, 0x73ED45F0),
    (0xBC983D0C, 0x31B14064, 0x234CD7A2, 0x0C92BBF9),
    (0x0DD0688A, 0xE131756C, 0x94C5E6DE, 0x84942131),
    (0x7F670454, 0xF25B03E0, 0x19D68362, 0x9F4D24D8),
    (0x09330F69, 0x62B5DCE0, 0xA4FBA462, 0xF20D3C12),
    (0x89B3B1BE, 0x95B97392, 0xF8444ABF, 0x755DADFE),
    (0xAC5B9DAE, 0x6CF8C0AC, 0x56E7B945, 0xD7ECF8F0),
    (0xD5B0DBEC, 0xC1692530, 0xD13B368A, 0xC0AE6A59),
    (0xFC2C3391, 0x285C8CD5, 0x456508EE, 0xC789E206),
    (0x29496F33, 0xAC62D558, 0xE0BAD605, 0xC5A538C6),
    (0xBF668497, 0x275217A1, 0x40C17AD4, 0x2ED877C0),
    (0x51B94DA4, 0xEFCC4DE8, 0x192412EA, 0xBBC170DD),
    (0x79271CA9, 0xD66A1C71, 0x81CA474E, 0x49831CAD),
    (0x048DA968, 0x4E25D096, 0x2D6CF897, 0xBC3959CA),
    (0x0C45D380, 0x2FD09996, 0x31F42F3B, 0x8F7FD0BF),
    (0xD8153472, 0x10C37B1E, 0xEEBDD61D, 0x7E3DB1EE),
    (0xFA4CA543, 0x0D75D71E, 0xAF61E0CC, 0x0D650C45),
    (0x808B1BCA, 0x7E034DE0, 0x6C8B597F, 0x3FACA725),
    (0xC7AFA441, 0x95A4EFED, 0xC9A9664E, 0xA2309431),
    (0x36200641, 0x2F8C1F4A, 0x27F6A5DE, 0x469D29F9),
    (0x37BA1E35, 0x43451A62, 0xE6865591, 0x19AF78EE),
    (0x86B4F697, 0x93A4F64F, 0xCBCBD086, 0xB476BB28),
    (0xBE7D2AFA, 0xAC513DE7, 0xFC599337, 0x5EA03E3A),
    (0xC56D7F54, 0x3E286A58, 0x79675A22, 0x099C7599),
    (0x3D0F08ED, 0xF32E3FDE, 0xBB8A1A8C, 0xC3A3FEC4),
    (0x2EC171F8, 0x33698309, 0x78EFD172, 0xD764B98C),
    (0x5CECEEAC, 0xA174084C, 0x95C3A400, 0x98BEE220),
    (0xBBDD0C2D, 0xFAB6FCD9, 0xDCCC080E, 0x9F04B41F),
    (0x60B3F7AF, 0x37EEE7C8, 0x836CFD98, 0x782CA060),
    (0xDF44EA33, 0xB0B2C398, 0x0583CE6F, 0x846D823E),
    (0xC7E31175, 0x6DB4E34D, 0xDAD60CA1, 0xE95ABA60),
    (0xE0DC6938, 0x84A0A7E3, 0xB7F695B5, 0xB46A010B),
    (0x1CEB6C66, 0x3535F274, 0x839DBC27, 0x80B4599C),
    (0xBBA106F4, 0xD49B697C, 0xB454B5D9, 0x2B69E58B),
    (0x5AD58A39, 0xDFD52844, 0x34973366, 0x8F467DDC),
    (0x67A67B1F, 0x3575ECB3, 0x1C71B19D, 0xA885C92B),
    (0xD5ABCC27, 0x9114EFF5, 0xA094340E, 0xA457374B),
    (0xB559DF49, 0xDEC9B2CF, 0x0F97FE2B, 0x5FA054D7),
    (0x2ACA7229, 0x99FF1B77, 0x156D66E0, 0xF7A55486),
    (0x565996FD, 0x8F988CEF, 0x27DC2CE2, 0x2F8AE186),
    (0xBE473747, 0x2590827B, 0xDC852399, 0x2DE46519),
    (0xF860AB7D, 0x00F48C88, 0x0ABFBB33, 0x91EA1838),
    (0xDE15C7E1, 0x1D90EFF8, 0xABC70129, 0xD9B2F0B4),
    (0xB3F0A2C3, 0x775539A7, 0x6CAA3BC1, 0xD5A6FC7E),
    (0x127C6E21, 0x6C07A459, 0xAD851388, 0x22E8BF5B),
    (0x08F3F132, 0x57B587E3, 0x087AD505, 0xFA070C27),
    (0xA826E824, 0x3F851E6A, 0x9D1F2276, 0x7962AD37),
    (0x14A6A13A, 0x469962FD, 0x914DB278, 0x3A9E8EC2),
    (0xFE20DDF7, 0x06505229, 0xF9C9F394, 0x4361A98D),
    (0x1DE7A33C, 0x37F81C96, 0xD9B967BE, 0xC00FA4FA),
    (0x5FD01E9A, 0x9F2E486D, 0x93205409, 0x814D7CC2),
    (0xE17F5CA5, 0x37D4BDD0, 0x1F408335, 0x43B6B603),
    (0x817CEEAE, 0x796C9EC0, 0x1BB3DED7, 0xBAC7263B),
    (0xB7827E63, 0x0988FEA0, 0x3800BD91, 0xCF876B00),
    (0xF0248D4B, 0xACA7BDC8, 0x739E30F3, 0xE0C469C2),
    (0x67363EB6, 0xFAE8E047, 0xF0C1C8E5, 0x828CCD47),
    (0x3DBD1D15, 0x05092D7B, 0x216FC6E3, 0x446860FB),
    (0xEBF39102, 0x8F4C1708, 0x519D2F36, 0xC67C5437),
    (0x89A0D454, 0x9201A282, 0xEA1B1E50, 0x1771BEDC),
    (0x9047FAD7, 0x88136D8C, 0xA488286B, 0x7FE9352C),
]

CBC_MASTERS = [
    bytes.fromhex("a5faedd8ce957c8bd0eaf6e0fd35af94"),
    bytes.fromhex("546971b417010603f37b0646f2f936ab"),
    bytes.fromhex("d1386665ea4afdd74acff484b5eccda7"),
    bytes.fromhex("1fabbf38af5b9cd7fe9f5544353c8483"),
    bytes.fromhex("94b85b16e5dfc253e93d536469d4de77"),
    bytes.fromhex("27c920f9b6679ba5600a3d90a1b218a2"),
    bytes.fromhex("84e34dc1a3fdcd90a9049f634a833c7a"),
    bytes.fromhex("5fb20522aa9024ca2e392f09c2255302"),
    bytes.fromhex("a1f95d9bfa9d321b921fff3948c47b70"),
    bytes.fromhex("8562c3acc1dff80355e9900ed77a495b"),
    bytes.fromhex("b26970ce661dfdeb4982378f64a29a56"),
    bytes.fromhex("95e0ddd6528251dd9b6e142bcf1af284"),
    bytes.fromhex("de1d30e4bf8d5a8eb368849b35c4a729"),
    bytes.fromhex("0f3f9cdabbecd0e6baeb5494895067a4"),
    bytes.fromhex("ac41a4da7fb9d2e6e145fe8c452cd74d"),
    bytes.fromhex("9617868697911e85c1608b66146275e3"),
    bytes.fromhex("e85c1a08f91c62e41c0e7ff3761dda06636ebba874f1806c08d3b78ae1e141c1"),
    bytes.fromhex("949e04059bf435133b2c4e09018a4fd2594d9b83ac9d94ee4ef32918a553d085"),
    bytes.fromhex("760dae181b2a6efdf9700b73f99ea49bfaa8305c3aff57a03ac4e093d3e07056"),
    bytes.fromhex("b4e283748cccc30d8fec8a012e4a43a87b87ba4c1cd019b12c92419b63be2fa9"),
    bytes.fromhex("3928af4f3876447efdb4fd4c187842e90fc5c987169d8312a6464b42fc690d3f"),
    bytes.fromhex("c5abaf6d98d19a7d027965ae6d74d1007459a60be902c2629d6d7149b6e4f249"),
    bytes.fromhex("4f5caf973380c5bcc45daeeed9d85bf73ae89ccb825134b8675391ac01721b4d"),
    bytes.fromhex("1b971c546813e450584f381e92a5250e4cd96ebf76dc07b413f8dd469d4ae61d"),
    bytes.fromhex("d696d67165a351fbffabdcad0939a322c1a6041816da7960852200599ea2464b"),
    bytes.fromhex("146708483e1c69f9fa4b585f1083d00b0c130c220b5f343139639765f9b43cbf"),
    bytes.fromhex("fbe4c27e4556a904b5369fbd2c1500fbc1daa157c62ca49c0c576b43c64397c3"),
    bytes.fromhex("6232bb92f9ddaa646c341a040518f499fe94ccb5c3e3c1843696d5a4b60350ef"),
    bytes.fromhex("8f4d9e2c2f029c5038c5d8bfb41b8a97661a68000f4c6983cca854180c68b3ab"),
    bytes.fromhex("ad6213ec5fe94f175578478842dbbfa302b22d473fe2296f6489f7d0185257cb"),
    bytes.fromhex("35e0612b44f82e5d1375e99ec31cf1d7195b771ac73926f967107587cfc9f109"),
    bytes.fromhex("f68e17565b52c890ba2899dfcede2232521ca6b734c6fdda0e39671a5cc51783"),
    bytes.fromhex("7ae7b58c44c692a92becf76ad45f2dda3a33d2e63fcaaee06ba4a52c35f1eb10"
                  "4e1f2c0913b4c5fab7159bcbdf1695c2"),
    bytes.fromhex("54ce07ef27aa4a6071e6303e75964f59ee51d1e04b0d4205d3d4a343750cc5de"
                  "a4a6c9f657baec70e342c9ad55848d36"),
    bytes.fromhex("3a8cd778d8ce718a250135018276fbed8302bfb96ee7fbd7adf2751741734839"
                  "6feae8b2ba324887da7cdf3fabf4e8e4"),
    bytes.fromhex("09dbf5f2fdfe9cadd1a13f3b5f4882b224adec7e61c362aaeb6b6a6f79dc7c7d"
                  "b521124495ee6719fe29ac810892aa45"),
    bytes.fromhex("fa831505bee1f7a089a456b2fa6448ad34cad19391fa9787b2c323c80729bab3"
                  "b3fe1aa52bf0f5647f1ead30b16816a4"),
    bytes.fromhex("f91f6cda55a74c7c709cbddbd88a1082eaf839cdbb67c0d7d327b2deb4693c12"
                  "c0a35d9602dc28ff97eaa13ff59d2cee"),
    bytes.fromhex("ac0bf66e5adb2cb3ac4f06a9592788f2018168368dbeb080acb8bf9a1f7b91f5"
                  "2a26c08436756c402359dd7f0da85428"),
    bytes.fromhex("e17c4c53252521159d1eea6204e6dd424c68c61a4f46ce42f2977a1ebc6e8ede"
                  "5a7d6160b858c08143c7742e1544a71a"),
    bytes.fromhex("a03c9c85c470cbbe41878fdacad34b17bde1e80d312c0198b68391c1b64e18c4"
                  "587d30223a16174eab434a2639613756"),
    bytes.fromhex("78a5b6c94114a57618187ab65d5950defae0d0dd8d84aa970798a942c77e8a49"
                  "dfb51dc748b219481cbd54203f960427"),
    bytes.fromhex("2a0a9a547eea758626907fb641c26e9c916b12f19125dba790c6922c232b1424"
                  "5de222ed0e208bc1243350089927f6b5"),
    bytes.fromhex("eddb50d0fc7080d5e6f740e23ce7b39b0d42f919cf92dccf355581073720785f"
                  "d18443426406559dff5ed9f5b153a7e2"),
    bytes.fromhex("0bed0842ab85f74d713c544b5beab4380419434894c0c54ea827fdb1c252d480"
                  "218c5f3e6652816034c934bf6f9e95a9"),
    bytes.fromhex("2d4bc0a838062c922d78c30932920861167783995a3b9b29bc27f0efc3a46786"
                  "c34c16f7607cb19257bc222bdd4c0436"),
    bytes.fromhex("63e6c97e0edd561cb701f1a4705ae9f9fad48d1ca5f2f7670865bec30c0729b7"
                  "a74e27d305a40294281d5240509a031d"),
    bytes.fromhex("541b43bf279b24e68077c9ecbfd39ad8acc494eaca048d058ef2619aaf8f2b77"
                  "75b5b0fee34a24e1d5d84f9709459420"),
    bytes.fromhex("aff0cf32e93706901d7137e7b46cf94109f11909c6eef34726b769d2a424b1b5"
                  "5bf5b6a5e11d727eb45b6fa745b513ee7b79dc0c17b213e7ba6dc6e4c949f012"),
    bytes.fromhex("853c752ef17968eb2e9eae3f13bd57719af3de689004fb8af5d38f3edd28e834"
                  "0d2d454107625f5076adca0d3de8cc8721c91a533cf97c76c3461fe836ab54bf"),
    bytes.fromhex("69993a38382f39c9254b1ebfac41bcc39cc8442c84bb8fe4a6c3e9e0b31638b6"
                  "bcef5e2bd6634870228c0e6f0312a023804dd9515a90d864f7d3fd3b3577c5eb"),
    bytes.fromhex("f1d4a3b44150422215eb82a97bd0b0dbbb8709bf59727bbb055e82e2ff1e679d"
                  "2e32cd932d3cdf015331a5acb024d17d476b3e2c632e2f5a192065fd9874a682"),
    bytes.fromhex("40b8160a425327603fb19b781c54a73580b699f3b13475eeaad735aeb22f8039"
                  "82a751611e61e1daab58e2ef3221e03f030cf16fc44eecc530431cb6eda7535b"),
    bytes.fromhex("ce765f3e703d1caf0ca5541d78e2a8e2cd3a6e7c661b7774bd21b6a76310ebb5"
                  "0be33d687286e186cc38e4ec5883a29aa0edeb5450dcb991911e53b04d781093"),
    bytes.fromhex("d332c826b79aa6c64ad237f0d4c9aaaff863d12b7a084a2765a9402656b02b8a"
                  "a1d7e1edafa6fb1ffb2c612c1289bd06863c991c882e725a6e900e597ecc08b4"),
    bytes.fromhex("6a3bc25785268fa5cb5a5e2747812baba59edf1ee812d3fa95d49abb537ed406"
                  "5c61be8bff05db1d4c404710ca2a22a3f7934640501ef7ce10f2e5ba2e01baa7"),
    bytes.fromhex("06ed63d8c7720d9c60a317044193d44cc06a98c8c170a73325b63dea21b28001"
                  "a872cc5bf026c5cc994df90164282ffe8441b0ae6c511656a0f9b9254108ec88"),
    bytes.fromhex("8c2cc0889dc0895f7e67c7359a183988a6f1f1930e4fa4cad3b0e8120105fd75"
                  "4e18f08163b57e956604fa67a10a0c23b79494504ab3126a959b510d97b64d30"),
    bytes.fromhex("9ffc2ee0836a60ffd8019090d1adf84b82aceb006b15b019145b6bc37bd31248"
                  "9543340db22a0e34f0df72fad390266d030e280e6b281b7a5bce980ad0880642"),
    bytes.fromhex("76309e11e2c03525995af1301a505d232cffd70a050ffc3fa2bb9a13abe30334"
                  "bc19f35aa9d1e69eb956bcd87ef6317ffd818a31f22ddb68090bae85d681d45f"),
    bytes.fromhex("e3b8b994687ba67025ae2fda1ca00d54b4d03eb33d79c94fb70dc517348da541"
                  "0600a2b63bb7119ef951f9868bba1239fce57f2309d25ec230f52d6f3c4d29fe"),
    bytes.fromhex("d1b01d907f8932f5561f7876188039cfc20071ccb95346f7839f3c2c7900c5b1"
                  "247b9ccbf1f7a5180f67ef2b649183b13da284580e9b68fc8bba55e5d0b954fb"),
    bytes.fromhex("76e134017616af3cb99dc318845118cbec892855a6588c69c34a511d5c4a8edd"
                  "97229e55e6e91f5a8b7760316d55339a6ba2e477584150d9168ce8561a360fce"),
]
